from .central_uploader import CentralUploader, generate_boundary

__all__ = ["CentralUploader", "generate_boundary"]
