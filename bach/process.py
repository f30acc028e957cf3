import os
import subprocess
from subprocess import list2cmdline
from typing import List
from bach.workspace import Module
from bach.folders import Folder, Folders
from bach.log import TaggedLog, FINE
from bach.languages.java import StandardStreams

class ProcessLauncher(Module):
	"""
	Starts external processes. Replace it with a subclass through Workspace.use().
	The returned handle must provide a readable binary stdout and a wait() method.
	"""
	def start(self, command : List[str]) -> subprocess.Popen:
		return subprocess.Popen(command, stdout = subprocess.PIPE, stderr = subprocess.STDOUT)

def _binaryOutput(stream):
	return getattr(stream, "buffer", stream)

class Runner():
	"""
	Launches a compiled module and streams its output.
	"""
	CHUNK = 0x2000

	def __init__(self, launcher : ProcessLauncher, folders : Folders, streams : StandardStreams):
		self.launcher = launcher
		self.folders = folders
		self.streams = streams

	def command(self, module : str, main : str) -> List[str]:
		modulePath = os.pathsep.join(str(self.folders.get(f)) for f in (Folder.DEPENDENCIES, Folder.TARGET_MAIN_COMPILED))
		return ["java", "--module-path", modulePath, "--module", f"{module}/{main}"]

	def run(self, module : str, main : str, log : TaggedLog) -> int:
		log.info("%s/%s", module, main)
		command = self.command(module, main)
		log.arguments(FINE, command)
		log.log(FINE, "%s", list2cmdline(command))
		process = self.launcher.start(command)
		self.streams.stdout.flush()
		output = _binaryOutput(self.streams.stdout)
		with process.stdout as stream:
			read = getattr(stream, "read1", stream.read)
			while True:
				chunk = read(self.CHUNK)
				if not chunk:
					break
				output.write(chunk)
				output.flush()
		try:
			return process.wait()
		except KeyboardInterrupt:
			process.kill()
			process.wait()
			return 1
