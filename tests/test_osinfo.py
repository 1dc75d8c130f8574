import sys

from hwscan.osinfo import UNKNOWN, detect_os, parse_os_release

SAMPLE = (
    'NAME="Ubuntu"\n'
    'VERSION_ID="22.04"\n'
    'PRETTY_NAME="Ubuntu 22.04.3 LTS"\n'
    'VERSION="22.04.3 LTS (Jammy Jellyfish)"\n'
)


def test_parse_os_release_sample():
    assert parse_os_release(SAMPLE) == ("Ubuntu 22.04.3 LTS", "22.04.3 LTS (Jammy Jellyfish)")


def test_parse_os_release_ignores_version_id():
    assert parse_os_release('VERSION_ID="22.04"\n') == ("", "")


def test_parse_os_release_empty():
    assert parse_os_release("") == ("", "")


def test_detect_os_without_release_file(tmp_path):
    info = detect_os(tmp_path / "missing", tmp_path / "ld")
    assert info.name == "Linux"
    assert info.version == UNKNOWN


def test_detect_os_reads_release_file(tmp_path):
    release = tmp_path / "os-release"
    release.write_text(SAMPLE)
    info = detect_os(release, tmp_path / "ld")
    assert info.name == "Ubuntu 22.04.3 LTS"
    assert info.version == "22.04.3 LTS (Jammy Jellyfish)"


def test_word_size_follows_loader(tmp_path):
    loader = tmp_path / "ld.so"
    loader.write_text("")
    present = detect_os(tmp_path / "missing", loader)
    absent = detect_os(tmp_path / "missing", tmp_path / "nothing")
    assert (present.is_64bit, present.is_32bit) == (True, False)
    assert (absent.is_64bit, absent.is_32bit) == (False, True)


def test_byte_order_matches_interpreter(tmp_path):
    info = detect_os(tmp_path / "missing", tmp_path / "ld")
    assert info.is_big_endian != info.is_little_endian
    assert info.is_little_endian == (sys.byteorder == "little")