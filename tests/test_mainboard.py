from pathlib import Path

from hwscan.mainboard import UNKNOWN, MainBoard, detect_mainboard, read_dmi


def _write(root: Path, name: str, text: str) -> None:
    target = root / "id"
    target.mkdir(parents=True, exist_ok=True)
    (target / name).write_text(text)


def test_read_dmi_missing_everywhere(tmp_path):
    assert read_dmi("board_vendor", [tmp_path / "a", tmp_path / "b"]) == "<unknown>"


def test_read_dmi_first_root_wins(tmp_path):
    first, second = tmp_path / "a", tmp_path / "b"
    _write(first, "board_name", "Alpha\n")
    _write(second, "board_name", "Beta\n")
    assert read_dmi("board_name", [first, second]) == "Alpha"


def test_read_dmi_falls_back_on_empty_value(tmp_path):
    first, second = tmp_path / "a", tmp_path / "b"
    _write(first, "board_name", "\n")
    _write(second, "board_name", "Beta\nignored\n")
    assert read_dmi("board_name", [first, second]) == "Beta"


def test_detect_mainboard_reads_all_fields(tmp_path):
    _write(tmp_path, "board_vendor", "Vendor Inc.\n")
    _write(tmp_path, "board_name", "Board X\n")
    _write(tmp_path, "board_serial", "SERIAL-PLACEHOLDER\n")
    board = detect_mainboard([tmp_path])
    assert board == MainBoard(
        vendor="Vendor Inc.",
        name="Board X",
        version=UNKNOWN,
        serial_number="SERIAL-PLACEHOLDER",
    )


def test_detect_mainboard_without_tables(tmp_path):
    board = detect_mainboard([tmp_path / "missing"])
    assert board == MainBoard()
    assert board.vendor == UNKNOWN