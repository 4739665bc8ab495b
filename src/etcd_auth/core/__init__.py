"""Shared core building blocks for etcd-auth."""
