"""HTTP transport for foodgraph."""
