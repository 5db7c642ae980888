"""Bundle a locally published Maven artifact and upload it to Maven Central."""

__version__ = "1.0.0"
