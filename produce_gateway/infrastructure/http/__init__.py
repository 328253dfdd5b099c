from .body_reader import read_bounded_body

__all__ = ["read_bounded_body"]
