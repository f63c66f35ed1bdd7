import pytest

from tilestat.power import battery_perc, battery_remaining, battery_state


@pytest.fixture
def battery(tmp_path):
    bat = tmp_path / "BAT0"
    bat.mkdir()
    return bat


def test_battery_perc(tmp_path, battery):
    (battery / "capacity").write_text("57\n")
    assert battery_perc("BAT0", str(tmp_path)) == "57"


def test_battery_perc_missing(tmp_path, battery):
    assert battery_perc("BAT0", str(tmp_path)) is None


def test_battery_perc_garbage(tmp_path, battery):
    (battery / "capacity").write_text("none\n")
    assert battery_perc("BAT0", str(tmp_path)) is None


@pytest.mark.parametrize(
    "status, symbol",
    [
        ("Charging", "+"),
        ("Discharging", "-"),
        ("Full", "o"),
        ("Not charging", "o"),
        ("Unknown", "?"),
    ],
)
def test_battery_state(tmp_path, battery, status, symbol):
    (battery / "status").write_text(status + "\n")
    assert battery_state("BAT0", str(tmp_path)) == symbol


def test_battery_state_missing(tmp_path, battery):
    assert battery_state("BAT0", str(tmp_path)) is None


def test_remaining_while_charging_is_empty(tmp_path, battery):
    (battery / "status").write_text("Charging\n")
    (battery / "charge_now").write_text("5000000\n")
    assert battery_remaining("BAT0", str(tmp_path)) == ""


def test_remaining_discharging_current(tmp_path, battery):
    (battery / "status").write_text("Discharging\n")
    (battery / "charge_now").write_text("5000000\n")
    (battery / "current_now").write_text("2500000\n")
    assert battery_remaining("BAT0", str(tmp_path)) == "2h 0m"


def test_remaining_discharging_energy_and_power(tmp_path, battery):
    (battery / "status").write_text("Discharging\n")
    (battery / "energy_now").write_text("3000\n")
    (battery / "power_now").write_text("2000\n")
    assert battery_remaining("BAT0", str(tmp_path)) == "1h 30m"


def test_remaining_zero_current(tmp_path, battery):
    (battery / "status").write_text("Discharging\n")
    (battery / "charge_now").write_text("5000\n")
    (battery / "current_now").write_text("0\n")
    assert battery_remaining("BAT0", str(tmp_path)) is None


def test_remaining_without_charge_file(tmp_path, battery):
    (battery / "status").write_text("Discharging\n")
    (battery / "current_now").write_text("100\n")
    assert battery_remaining("BAT0", str(tmp_path)) is None