"""HTTP surface: JSON API routers, server-rendered views and error mapping."""
