from .ship import ship_router
