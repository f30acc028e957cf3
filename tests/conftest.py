"""
Shared fixtures: a compiler and a launcher that record what they are asked
to do instead of running java, and a builder wired to them.
"""
import io
import pytest

from bach.bach import Bach
from bach.folders import Folder
from bach.languages.java import JavaCompiler, StandardStreams
from bach.log import FINE, LOGGER_NAME
from bach.process import ProcessLauncher
from bach.workspace import Workspace


class RecordingCompiler(JavaCompiler):
	key = JavaCompiler.key
	status = 0

	def __init__(self, context):
		super().__init__(context)
		self.calls = []

	def run(self, stdin, stdout, stderr, arguments):
		self.calls.append(list(arguments))
		return self.status

	def option(self, call, name):
		arguments = self.calls[call]
		return arguments[arguments.index(name) + 1]

	def sources(self, call):
		return [a for a in self.calls[call] if a.endswith(".java")]


class FakeProcess:
	def __init__(self, output, code):
		self.stdout = io.BytesIO(output)
		self.code = code
		self.interrupt = False
		self.killed = False

	def wait(self):
		if self.interrupt:
			self.interrupt = False
			raise KeyboardInterrupt()
		return self.code

	def kill(self):
		self.killed = True


class RecordingLauncher(ProcessLauncher):
	key = ProcessLauncher.key
	output = b"Greetings!\n"
	code = 0
	interrupt = False

	def __init__(self, context):
		super().__init__(context)
		self.commands = []
		self.processes = []

	def start(self, command):
		self.commands.append(list(command))
		process = FakeProcess(self.output, self.code)
		process.interrupt = self.interrupt
		self.processes.append(process)
		return process


def write(path, text="// empty\n"):
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(text, encoding="utf-8")
	return path


@pytest.fixture
def workspace():
	ws = Workspace()
	ws.use(RecordingCompiler)
	ws.use(RecordingLauncher)
	return ws


@pytest.fixture
def streams():
	return StandardStreams(io.StringIO(), io.BytesIO(), io.BytesIO())


@pytest.fixture
def makeBach(workspace, streams, tmp_path):
	def make(layout, level=FINE):
		bach = Bach(level, layout, workspace)
		bach.streams = streams
		bach.set(Folder.SOURCE, tmp_path / "src")
		bach.set(Folder.TARGET, tmp_path / "target")
		bach.set(Folder.DEPENDENCIES, tmp_path / "deps")
		return bach
	return make


@pytest.fixture
def log(caplog):
	from bach.log import Log
	caplog.set_level(1, logger=LOGGER_NAME)
	return Workspace().add(Log).bind("test", FINE)
