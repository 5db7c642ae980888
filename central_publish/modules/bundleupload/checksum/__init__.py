from .generator import ChecksumGenerator, FileSidecarWriter, SidecarWriter

__all__ = ["ChecksumGenerator", "FileSidecarWriter", "SidecarWriter"]
