from unittest.mock import patch

from jswrap_dts.settings import Settings
from jswrap_dts.typegen.cli import main

SOURCE = """/*JSON{
  "type" : "class",
  "class" : "Widget"
}
*/
/*JSON{
  "type" : "method",
  "class" : "Widget",
  "name" : "spin",
  "typedef" : "spin(): void"
}
*/
"""


def _args(tmp_path, *command):
    return ["--source-dir", str(tmp_path / "src"), "--output", str(tmp_path / "out" / "types.d.ts"), *command]


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_generate_writes_document(tmp_path, write_source, capsys):
    write_source("src/jswrap_widget.c", SOURCE)
    assert main(_args(tmp_path, "generate")) == 0
    output = tmp_path / "out" / "types.d.ts"
    assert output.read_text() == "class Widget {\n  spin(): void\n}\n"
    assert "wrote" in capsys.readouterr().out


def test_generate_reports_dropped_members(tmp_path, write_source, capsys):
    write_source("src/jswrap_widget.c", SOURCE + '/*JSON{"type": "method", "class": "Nope", "name": "lost", "typedef": "lost(): void"}*/\n')
    assert main(_args(tmp_path, "generate")) == 0
    out = capsys.readouterr().out
    assert "dropped" in out and "lost" in out and "Nope" in out


def test_generate_without_sources_fails(tmp_path, capsys):
    (tmp_path / "src").mkdir()
    assert main(_args(tmp_path, "generate")) == 1
    assert "no files matching" in capsys.readouterr().err


def test_pattern_option(tmp_path, write_source):
    write_source("src/bindings.c", SOURCE)
    assert main([*_args(tmp_path), "--pattern", "bindings.c", "generate"]) == 0


def test_check_up_to_date(tmp_path, write_source, capsys):
    write_source("src/jswrap_widget.c", SOURCE)
    main(_args(tmp_path, "generate"))
    assert main(_args(tmp_path, "check")) == 0
    assert "OK" in capsys.readouterr().out


def test_check_stale(tmp_path, write_source, capsys):
    write_source("src/jswrap_widget.c", SOURCE)
    main(_args(tmp_path, "generate"))
    (tmp_path / "out" / "types.d.ts").write_text("class Old {\n}\n")
    assert main(_args(tmp_path, "check")) == 1
    assert "stale" in capsys.readouterr().out


def test_check_missing_output(tmp_path, write_source, capsys):
    write_source("src/jswrap_widget.c", SOURCE)
    assert main(_args(tmp_path, "check")) == 1
    assert "does not exist" in capsys.readouterr().err


def test_generate_summary_counts_declarations(tmp_path, write_source, capsys):
    write_source("src/jswrap_widget.c", SOURCE + '/*JSON{"type": "method", "class": "Widget", "name": "doc_only"}*/\n')
    assert main(_args(tmp_path, "generate")) == 0
    assert "3 records, 2 with declarations" in capsys.readouterr().out


def test_log_level_option_configures_logging(tmp_path, write_source):
    write_source("src/jswrap_widget.c", SOURCE)
    with patch("jswrap_dts.typegen.cli.setup_logging") as mock_setup:
        assert main([*_args(tmp_path), "--log-level", "DEBUG", "generate"]) == 0
    mock_setup.assert_called_once_with(level="DEBUG")


def test_log_level_from_settings(tmp_path, write_source):
    write_source("src/jswrap_widget.c", SOURCE)
    with (
        patch("jswrap_dts.typegen.cli.settings", Settings(log_level="WARNING")),
        patch("jswrap_dts.typegen.cli.setup_logging") as mock_setup,
    ):
        assert main(_args(tmp_path, "generate")) == 0
    mock_setup.assert_called_once_with(level="WARNING")


def test_logging_left_alone_without_level(tmp_path, write_source):
    write_source("src/jswrap_widget.c", SOURCE)
    with (
        patch("jswrap_dts.typegen.cli.settings", Settings(log_level=None)),
        patch("jswrap_dts.typegen.cli.setup_logging") as mock_setup,
    ):
        assert main(_args(tmp_path, "generate")) == 0
    mock_setup.assert_not_called()
