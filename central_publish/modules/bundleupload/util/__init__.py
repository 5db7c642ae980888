from .walk import relative_posix, walk_tree

__all__ = ["relative_posix", "walk_tree"]
