import hashlib
import re
from pathlib import Path

import pytest

from central_publish.modules.bundleupload.checksum import ChecksumGenerator
from central_publish.modules.bundleupload.domain import ChecksumAlgorithm, ChecksumError


class MemoryWriter:
    def __init__(self):
        self.written = {}

    def write(self, sidecar, hex_digest):
        self.written[sidecar] = hex_digest


def test_generate_writes_lowercase_hex_sidecar(tmp_path):
    artifact = tmp_path / "widget-1.2.3.jar"
    artifact.write_bytes(b"widget bytes")

    record = ChecksumGenerator().generate(artifact, "sha1")

    sidecar = tmp_path / "widget-1.2.3.jar.sha1"
    assert record.sidecar == sidecar
    assert record.algorithm is ChecksumAlgorithm.SHA1
    assert sidecar.read_text() == hashlib.sha1(b"widget bytes").hexdigest()
    assert record.hex_digest == sidecar.read_text()


def test_generate_all_produces_three_sidecars_of_fixed_length(tmp_path):
    artifact = tmp_path / "widget-1.2.3.pom"
    artifact.write_text("<project/>")

    records = ChecksumGenerator().generate_all(artifact)

    assert [record.algorithm.value for record in records] == ["md5", "sha1", "sha256"]
    for record in records:
        content = record.sidecar.read_text()
        assert re.fullmatch(r"[0-9a-f]+", content)
        assert len(content) == record.algorithm.hex_length
    assert sorted(path.name for path in tmp_path.iterdir()) == [
        "widget-1.2.3.pom",
        "widget-1.2.3.pom.md5",
        "widget-1.2.3.pom.sha1",
        "widget-1.2.3.pom.sha256",
    ]


def test_generate_is_idempotent_and_overwrites(tmp_path):
    artifact = tmp_path / "widget.jar"
    artifact.write_bytes(b"same content")
    (tmp_path / "widget.jar.md5").write_text("stale")
    generator = ChecksumGenerator()

    first = generator.generate(artifact, ChecksumAlgorithm.MD5)
    second = generator.generate(artifact, ChecksumAlgorithm.MD5)

    assert first.hex_digest == second.hex_digest == hashlib.md5(b"same content").hexdigest()
    assert (tmp_path / "widget.jar.md5").read_text() == first.hex_digest


def test_custom_writer_keeps_repository_untouched(tmp_path):
    artifact = tmp_path / "widget.jar"
    artifact.write_bytes(b"abc")
    writer = MemoryWriter()

    ChecksumGenerator(writer).generate_all(artifact)

    assert list(tmp_path.iterdir()) == [artifact]
    assert writer.written[tmp_path / "widget.jar.sha256"] == hashlib.sha256(b"abc").hexdigest()


def test_unreadable_file_raises_checksum_error(tmp_path):
    missing = tmp_path / "gone.jar"

    with pytest.raises(ChecksumError) as excinfo:
        ChecksumGenerator().generate(missing, "md5")

    assert excinfo.value.path == missing


def test_unknown_algorithm_is_rejected(tmp_path):
    artifact = tmp_path / "widget.jar"
    artifact.write_bytes(b"abc")

    with pytest.raises(ValueError):
        ChecksumGenerator().generate(Path(artifact), "crc32")
