import pytest

from smarthome.house import ReportError, SmartHouse, SmartHouseError
from smarthome.info import DeviceInfoProvider


class OkInfoProvider(DeviceInfoProvider):
    def info(self, location_name, device_name):
        return f"location: {location_name}, device: {device_name}"


class FailInfoProvider(DeviceInfoProvider):
    def info(self, location_name, device_name):
        return None


def make_house():
    return SmartHouse(
        "my smart house",
        {
            "room1": ["room1_socket_1", "room1_thermo_1"],
            "room2": ["room2_socket_2"],
        },
    )


def test_create_report_ok():
    house = make_house()
    report = house.create_report(OkInfoProvider())
    report = "\n".join(sorted(report.split("\n")))
    assert report == (
        "location: room1, device: room1_socket_1\n"
        "location: room1, device: room1_thermo_1\n"
        "location: room2, device: room2_socket_2"
    )


def test_create_report_fail():
    house = make_house()
    with pytest.raises(ReportError, match="create report error"):
        house.create_report(FailInfoProvider())


def test_report_error_is_house_error():
    with pytest.raises(SmartHouseError):
        make_house().create_report(FailInfoProvider())


def test_get_rooms():
    assert sorted(make_house().rooms()) == ["room1", "room2"]


def test_add_room():
    house = make_house()
    house.add_room("room3")
    assert sorted(house.rooms()) == ["room1", "room2", "room3"]


def test_add_existing_room_keeps_single_entry():
    house = make_house()
    house.add_room("room1")
    assert sorted(house.rooms()) == ["room1", "room2"]


def test_delete_room():
    house = make_house()
    house.delete_room("room1")
    assert list(house.rooms()) == ["room2"]
    assert list(house.devices("room1")) == []


def test_get_devices():
    assert sorted(make_house().devices("room1")) == ["room1_socket_1", "room1_thermo_1"]


def test_add_device():
    house = make_house()
    house.add_device("room1", "room1_socket_3")
    assert sorted(house.devices("room1")) == [
        "room1_socket_1",
        "room1_socket_3",
        "room1_thermo_1",
    ]

    house.add_device("room3", "room3_socket_1")
    assert sorted(house.rooms()) == ["room1", "room2"]
    assert list(house.devices("room3")) == []


def test_delete_device():
    house = SmartHouse(
        "my smart house",
        {
            "room1": ["room1_socket_1", "room1_thermo_1", "room1_socket_3"],
            "room2": ["room2_socket_2"],
        },
    )

    house.delete_device("room1", "room1_socket_1")
    house.delete_device("room2", "room2_socket_2")
    house.delete_device("room3", "some_unexisting_device")

    assert sorted(house.devices("room1")) == ["room1_socket_3", "room1_thermo_1"]
    assert list(house.devices("room2")) == []
    assert list(house.devices("room3")) == []
    assert sorted(house.rooms()) == ["room1", "room2"]


def test_devices_is_a_snapshot():
    house = make_house()
    devices = house.devices("room2")
    house.add_device("room2", "extra")
    assert list(devices) == ["room2_socket_2"]