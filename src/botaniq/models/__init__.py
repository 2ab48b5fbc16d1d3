"""Database models."""
from botaniq.models.user import User
from botaniq.models.recommendation import Recommendation
from botaniq.models.garden import GardenEntry
from botaniq.models.plant import CleanedPlant, PlantFamily

__all__ = ["User", "Recommendation", "GardenEntry", "CleanedPlant", "PlantFamily"]
