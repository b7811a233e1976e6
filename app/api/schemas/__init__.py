from app.api.schemas.process import ProcessResponse

__all__ = ["ProcessResponse"]
