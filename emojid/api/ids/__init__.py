from .ids import router as ids_router

__all__ = ["ids_router"]
