"""Platform modules of etcd-auth."""
