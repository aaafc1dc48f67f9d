from typer.testing import CliRunner

from ganttgrid.terminal.app import app

runner = CliRunner()

DAY_WINDOW = ["--start", "2024-01-01", "--end", "2024-01-30", "--mode", "day", "--unit-width", "150"]


def test_to_dates(config_path) -> None:
    result = runner.invoke(app, ["to-dates", "300", "450", *DAY_WINDOW])

    assert result.exit_code == 0, result.output
    assert "2024-01-03 00:00:00.000" in result.output
    assert "2024-01-05 23:59:59.999" in result.output


def test_to_pixels_by_alias(config_path) -> None:
    result = runner.invoke(app, ["p", "2024-01-03", "2024-01-05T18:00", *DAY_WINDOW])

    assert result.exit_code == 0, result.output
    assert "300px" in result.output
    assert "450px" in result.output


def test_overlap(config_path) -> None:
    result = runner.invoke(
        app, ["overlap", "2024-01-01", "2024-01-10", "2024-01-10", "2024-01-20"]
    )

    assert result.exit_code == 0, result.output
    assert "overlapping" in result.output
    assert "not overlapping" not in result.output


def test_no_overlap(config_path) -> None:
    result = runner.invoke(
        app, ["o", "2024-01-01", "2024-01-09", "2024-01-10", "2024-01-20"]
    )

    assert result.exit_code == 0, result.output
    assert "not overlapping" in result.output


def test_week_headers(config_path) -> None:
    result = runner.invoke(
        app,
        ["headers", "--start", "2024-01-22", "--end", "2024-02-10", "--mode", "week", "--unit-width", "140"],
    )

    assert result.exit_code == 0, result.output
    assert "Jan 2024" in result.output
    assert "Feb 2024" in result.output


def test_month_headers_are_empty(config_path) -> None:
    result = runner.invoke(
        app, ["headers", "--start", "2024-01-01", "--end", "2024-06-30", "--mode", "month"]
    )

    assert result.exit_code == 0, result.output
    assert "No secondary header row" in result.output


def test_marker(config_path) -> None:
    result = runner.invoke(app, ["marker", *DAY_WINDOW, "--at", "2024-01-03T12:00"])

    assert result.exit_code == 0, result.output
    assert "375px" in result.output


def test_marker_outside_window_is_hidden(config_path) -> None:
    result = runner.invoke(app, ["m", *DAY_WINDOW, "--at", "2024-03-01"])

    assert result.exit_code == 0, result.output
    assert "hidden" in result.output


def test_no_header(config_path) -> None:
    result = runner.invoke(
        app, ["--no-header", "overlap", "2024-01-01", "2024-01-10", "2024-01-10", "2024-01-20"]
    )

    assert result.exit_code == 0, result.output
    assert "ganttgrid" not in result.output


def test_bad_date_is_rejected(config_path) -> None:
    result = runner.invoke(
        app, ["to-dates", "0", "100", "--start", "2024-13-45", "--end", "2024-02-01"]
    )

    assert result.exit_code != 0


def test_end_before_start_is_rejected(config_path) -> None:
    result = runner.invoke(
        app, ["headers", "--start", "2024-02-01", "--end", "2024-01-01"]
    )

    assert result.exit_code != 0


def test_config_set_and_view(config_path) -> None:
    result = runner.invoke(app, ["config", "set", "--default-unit-width", "80"])

    assert result.exit_code == 0, result.output
    assert config_path.is_file()

    result = runner.invoke(app, ["c", "v"])

    assert result.exit_code == 0, result.output
    assert "80" in result.output
