"""HTTP interface: routers, dependencies and templates."""
