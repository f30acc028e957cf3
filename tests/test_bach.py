import pytest

from bach.bach import Bach
from bach.exceptions import BuildException
from bach.folders import Folder
from bach.layout import Layout
from bach.log import CONFIG, FINE, INFO, LogContext, Log, LOGGER_NAME
from bach.workspace import Workspace
from conftest import RecordingCompiler, write


def messages(caplog):
	return [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]


def test_layout_is_fixed(makeBach):
	bach = makeBach(Layout.TILED)
	assert bach.layout is Layout.TILED
	with pytest.raises(AttributeError):
		bach.layout = Layout.BASIC


def test_set_and_get(makeBach, tmp_path):
	bach = makeBach(Layout.BASIC)
	assert bach.set(Folder.TARGET, tmp_path / "t") is bach
	assert bach.get(Folder.TARGET_TEST_COMPILED) == tmp_path / "t/test/compiled"


def test_clean(makeBach, tmp_path):
	bach = makeBach(Layout.BASIC)
	write(tmp_path / "target" / "x" / "y.class")
	assert bach.clean() is bach
	assert not (tmp_path / "target").exists()
	bach.clean()


def test_lifecycle(makeBach, tmp_path, streams):
	bach = makeBach(Layout.BASIC)
	write(tmp_path / "src" / "m" / "module-info.java")
	assert bach.clean().compile().run("m", "m.Main") == 0
	assert len(bach.compiler.calls) == 1
	assert streams.stdout.getvalue() == b"Greetings!\n"


def test_jar_is_not_implemented(makeBach):
	with pytest.raises(NotImplementedError):
		makeBach(Layout.BASIC).jar()


def test_injected_capabilities(workspace):
	bach = Bach(INFO, Layout.BASIC, workspace)
	assert isinstance(bach.compiler, RecordingCompiler)
	assert workspace[RecordingCompiler] is bach.compiler
	assert RecordingCompiler in workspace


def test_default_compiler_without_javac(monkeypatch, tmp_path):
	monkeypatch.setattr("shutil.which", lambda name: None)
	bach = Bach(INFO, Layout.BASIC)
	write(tmp_path / "src" / "A.java")
	with pytest.raises(BuildException) as e:
		bach.compileModules(tmp_path / "src", tmp_path / "out")
	assert e.value.message == "java compiler not available"


def test_log_tags_and_levels(makeBach, caplog):
	caplog.set_level(1, logger=LOGGER_NAME)
	bach = makeBach(Layout.BASIC, level=FINE)
	bach.clean()
	lines = messages(caplog)
	assert any(line.startswith("   init   info| Bach initialized") for line in lines)
	assert any(line.startswith("  clean config| ") for line in lines)


def test_info_threshold_hides_details(makeBach, caplog):
	caplog.set_level(1, logger=LOGGER_NAME)
	makeBach(Layout.BASIC, level=INFO)
	lines = messages(caplog)
	assert lines == ["   init Bach initialized"]


def test_log_context_is_immutable():
	context = LogContext("compile", INFO)
	assert context.withTag("run") == LogContext("run", INFO)
	assert context.withThreshold(FINE).threshold == FINE
	assert context.tag == "compile"
	with pytest.raises(AttributeError):
		context.tag = "run"


def test_tag_change_emits_separator(caplog):
	caplog.set_level(1, logger=LOGGER_NAME)
	log = Workspace().add(Log).bind("a", CONFIG)
	assert log.tag("a") is log
	log.tag("b")
	assert messages(caplog) == ["      b config| "]


def test_report_prints_message(capsys):
	BuildException("broken").report()
	assert capsys.readouterr().out == "broken\n"
