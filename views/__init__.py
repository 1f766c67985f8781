"""View modules for manual routing.

Each page lives under `views/` and exposes a `view(ctx)` function taking a
`services.routing.NavContext`. Register new pages in `PAGE_REGISTRY` inside
`app.py`.
"""
