"""Auth infrastructure: wire schema, codecs, builders, translators, adapters and factories."""
