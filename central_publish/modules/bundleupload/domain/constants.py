"""Constants shared across bundleupload domain models."""

PUBLISHABLE_EXTENSIONS = ("jar", "pom", "aar", "module")
SIGNATURE_SUFFIX = ".asc"
CHECKSUM_SUFFIXES = (".md5", ".sha1", ".sha256")

BUNDLE_EXTENSION = "zip"
DEFAULT_BUNDLE_NAME = "maven-central-upload-bundle"

CENTRAL_BASE_URL = "https://central.sonatype.com"
CENTRAL_UPLOAD_PATH = "/api/v1/publisher/upload"
CENTRAL_STATUS_PATH = "/api/v1/publisher/status"

PUBLISHING_TYPE_AUTOMATIC = "AUTOMATIC"
BOUNDARY_PREFIX = "----WebKitFormBoundary"
