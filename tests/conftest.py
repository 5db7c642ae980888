from pathlib import Path

import pytest

from central_publish.modules.bundleupload.domain import ArtifactCoordinate

WIDGET = ArtifactCoordinate(group_id="com.acme", artifact_id="widget", version="1.2.3")


def write_widget_repo(root: Path, *, signatures: bool = True, stray: bool = True) -> Path:
    """Lay out ``com/acme/widget/1.2.3`` the way ``publishToMavenLocal`` leaves it."""
    version_dir = root / "com" / "acme" / "widget" / "1.2.3"
    version_dir.mkdir(parents=True)
    (version_dir / "widget-1.2.3.jar").write_bytes(b"PK\x03\x04 fake jar bytes")
    (version_dir / "widget-1.2.3.pom").write_text("<project><artifactId>widget</artifactId></project>\n")
    if signatures:
        (version_dir / "widget-1.2.3.jar.asc").write_text("-----BEGIN PGP SIGNATURE-----\njar\n")
        (version_dir / "widget-1.2.3.pom.asc").write_text("-----BEGIN PGP SIGNATURE-----\npom\n")
    if stray:
        (version_dir / "_remote.repositories").write_text("widget-1.2.3.jar>=\n")
        (version_dir / "notes.txt").write_text("not for publishing\n")
    return version_dir


@pytest.fixture
def widget():
    return WIDGET


@pytest.fixture
def repo_root(tmp_path) -> Path:
    root = tmp_path / "m2" / "repository"
    write_widget_repo(root)
    return root
