from .ship_repository import ShipRepository
