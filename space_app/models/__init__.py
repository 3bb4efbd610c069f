from .ship import Ship, ShipType
