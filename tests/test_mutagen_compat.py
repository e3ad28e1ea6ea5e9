"""Compatibility tests: id3read vs mutagen.

Tag files are written by mutagen (see generate_test_files.py) in both
ID3v2.3 and ID3v2.4, then read back by id3read and checked against the
recorded ground truth and against mutagen's own reading of the file.
"""
import os

import pytest

from mutagen.id3 import ID3

import id3read

from generate_test_files import generate_all


@pytest.fixture(scope="module")
def generated(tmp_path_factory):
    gen_dir = str(tmp_path_factory.mktemp("generated"))
    return gen_dir, generate_all(gen_dir)


def _files(generated):
    gen_dir, truth = generated
    for name, expected in sorted(truth.items()):
        yield os.path.join(gen_dir, name), expected


class TestGroundTruth:
    """Decoded values match what the files were written with."""

    def test_version(self, generated):
        for path, expected in _files(generated):
            tag = id3read.parse_file(path)
            assert tag.version == expected["version"], path

    def test_no_header_flags(self, generated):
        for path, _ in _files(generated):
            assert id3read.parse_file(path).flags == frozenset()

    def test_frame_count(self, generated):
        for path, expected in _files(generated):
            tag = id3read.parse_file(path)
            assert len(tag) == expected["frame_count"], \
                f"{path}: {tag.keys()}"

    def test_frame_values(self, generated):
        for path, expected in _files(generated):
            tag = id3read.parse_file(path)
            for frame_id, values in expected["frames"].items():
                assert tag.getall(frame_id) == values, f"{path}: {frame_id}"

    def test_raw_frames(self, generated):
        for path, expected in _files(generated):
            tag = id3read.parse_file(path)
            for frame_id, prefix in expected.get("raw_prefix", {}).items():
                value = tag.get(frame_id)
                assert isinstance(value, bytes)
                assert value.startswith(prefix)

    def test_apic_picture_type(self, generated):
        gen_dir, _ = generated
        tag = id3read.parse_file(os.path.join(gen_dir, "mp3_binary_v24.mp3"))
        picture = tag.get("APIC")
        assert picture[1] is id3read.PictureType.COVER_FRONT


class TestAgainstMutagen:
    """id3read agrees with mutagen's reading of the same file."""

    def test_tag_size(self, generated):
        for path, _ in _files(generated):
            orig = ID3(path)
            assert id3read.parse_file(path).size == orig.size - 10

    def test_text_frames(self, generated):
        for path, _ in _files(generated):
            orig = ID3(path)
            tag = id3read.parse_file(path)
            for key in ["TIT2", "TPE1", "TALB", "TRCK", "TCON"]:
                if key in orig:
                    assert tag.get(key) == orig[key].text[0], f"{path}: {key}"

    def test_frame_ids(self, generated):
        for path, _ in _files(generated):
            orig = ID3(path)
            orig_ids = sorted(frame.FrameID for frame in orig.values())
            assert sorted(id3read.parse_file(path).keys()) == orig_ids

    def test_user_text(self, generated):
        for path, _ in _files(generated):
            orig = ID3(path)
            tag = id3read.parse_file(path)
            for desc, value in tag.getall("TXXX"):
                assert orig[f"TXXX:{desc}"].text[0] == value

    def test_picture(self, generated):
        for path, _ in _files(generated):
            orig = ID3(path)
            for mime, ptype, desc, data in id3read.parse_file(path).getall("APIC"):
                frame = orig[f"APIC:{desc}"]
                assert frame.mime == mime
                assert int(frame.type) == ptype
                assert frame.data == data

    def test_source_positioned_after_tag(self, generated):
        for path, _ in _files(generated):
            orig = ID3(path)
            with open(path, "rb") as f:
                id3read.parse_tag(f)
                assert f.tell() == orig.size
                assert f.read(2) == b"\xff\xfb"
