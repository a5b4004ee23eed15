from csskit.model.rectangle import Rectangle

__all__ = ["Rectangle"]
