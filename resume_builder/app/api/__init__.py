"""
HTTP API of the resume builder.

Routers live in `api.routes`; their business logic lives in
`api.routes.route_logic` so it can be exercised without an HTTP client.
"""
