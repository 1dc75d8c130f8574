from hwscan.pci import PCIDevice, PCIMapper, PCIVendor, load_mapper

SAMPLE = (
    "# PCI id list\n"
    "\n"
    "10de  NVIDIA Corporation\n"
    "\t1b80  GP104 [GeForce GTX 1080]\n"
    "\t\t1043 8591  GeForce GTX 1080\n"
    "8086  Intel Corporation\n"
    "\t3e92  CoffeeLake-S GT2 [UHD Graphics 630]\n"
)


def test_vendor_lookup():
    mapper = PCIMapper(SAMPLE)
    vendor = mapper["10de"]
    assert vendor.vendor_id == "10de"
    assert vendor.vendor_name == "NVIDIA Corporation"


def test_hex_prefix_is_ignored():
    mapper = PCIMapper(SAMPLE)
    assert mapper["0x8086"] == mapper.vendor_from_id("8086")
    assert mapper["0x8086"]["0x3e92"].device_name == "CoffeeLake-S GT2 [UHD Graphics 630]"


def test_device_and_subsystems():
    device = PCIMapper(SAMPLE)["10de"]["1b80"]
    assert device.device_name == "GP104 [GeForce GTX 1080]"
    assert device.subsystems == {"1043 8591": "GeForce GTX 1080"}


def test_devices_belong_to_their_vendor():
    mapper = PCIMapper(SAMPLE)
    assert set(mapper["10de"].devices) == {"1b80"}
    assert set(mapper["8086"].devices) == {"3e92"}


def test_unknown_vendor_is_invalid():
    vendor = PCIMapper(SAMPLE)["abcd"]
    assert (vendor.vendor_id, vendor.vendor_name) == ("0000", "invalid")
    assert vendor["1b80"].device_name == "invalid"


def test_unknown_device_is_invalid():
    device = PCIMapper(SAMPLE)["10de"]["ffff"]
    assert (device.device_id, device.device_name) == ("0000", "invalid")


def test_first_definition_wins_and_later_devices_attach():
    text = "10de  First Name\n10de  Second Name\n\t1234  Extra Device\n"
    vendor = PCIMapper(text)["10de"]
    assert vendor.vendor_name == "First Name"
    assert vendor["1234"].device_name == "Extra Device"


def test_malformed_lines_are_skipped():
    text = "\t1111  Orphan Device\n10de NoDoubleSpace\n8086  Intel Corporation\n"
    mapper = PCIMapper(text)
    assert len(mapper) == 1
    assert mapper["10de"].vendor_name == "invalid"
    assert mapper["8086"]["1111"].device_name == "invalid"


def test_vendor_getitem_on_constructed_vendor():
    vendor = PCIVendor("1af4", "Virtio")
    vendor.devices["1000"] = PCIDevice("1000", "Virtio network device")
    assert vendor["0x1000"].device_name == "Virtio network device"


def test_load_mapper_from_file(tmp_path):
    path = tmp_path / "pci.ids"
    path.write_text(SAMPLE, encoding="utf-8")
    mapper = load_mapper(path)
    assert mapper["10de"].vendor_name == "NVIDIA Corporation"
    assert load_mapper(path) is mapper


def test_load_mapper_missing_file_is_empty(tmp_path):
    mapper = load_mapper(tmp_path / "missing.ids")
    assert len(mapper) == 0
    assert mapper["10de"].vendor_name == "invalid"