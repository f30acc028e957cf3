import shutil
import subprocess
import sys
import time
from typing import List
from bach.path import Path
from bach.workspace import Module
from bach.folders import Folder, Folders
from bach.log import TaggedLog, INFO, FINE, FINEST
from bach.exceptions import BuildException


"""

javac in multi-module mode.

--module-source-path names a directory whose direct children are modules,
each one a directory named after the module and holding its module-info.java.
All modules found there are compiled in one go, each into its own
subdirectory of the -d destination.

--module-path names a directory of already compiled modules to compile against.

Every source file must still be listed on the command line.

"""

SOURCE_SUFFIX = ".java"
MODULE_DESCRIPTOR = "module-info.java"
TEST_MODULE_DESCRIPTOR = "module-info.test"

class StandardStreams():
	def __init__(self, stdin = None, stdout = None, stderr = None):
		self.stdin = sys.stdin if stdin is None else stdin
		self.stdout = sys.stdout if stdout is None else stdout
		self.stderr = sys.stderr if stderr is None else stderr

class JavaCompiler(Module):
	"""
	The compiler. Replace it with a subclass through Workspace.use().
	This implementation runs the javac found on the PATH.
	"""
	def run(self, stdin, stdout, stderr, arguments : List[str]) -> int:
		javac = shutil.which("javac")
		if javac is None:
			raise BuildException("java compiler not available")
		return subprocess.run([javac, *arguments], stdin = stdin, stdout = stdout, stderr = stderr).returncode

class JavaCompilation():
	"""
	Compiles every module found in a module source path.
	"""
	def __init__(self, compiler : JavaCompiler, folders : Folders, streams : StandardStreams):
		self.compiler = compiler
		self.folders = folders
		self.streams = streams
		self.lastSourceCount = 0

	def arguments(self, moduleSourcePath, destinationPath, log : TaggedLog) -> List[str]:
		arguments = []
		if log.threshold <= FINEST:
			arguments.append("-verbose")
		arguments += ["-d", str(destinationPath)]
		arguments += ["-encoding", "UTF-8"]
		arguments += ["--module-path", str(self.folders.get(Folder.DEPENDENCIES))]
		arguments += ["--module-source-path", str(moduleSourcePath)]
		return arguments

	def compile(self, moduleSourcePath, destinationPath, log : TaggedLog) -> int:
		sourcePath = Path(moduleSourcePath)
		if not sourcePath.isPresent():
			raise BuildException(f"module source path `{moduleSourcePath}` does not exist!")
		arguments = self.arguments(moduleSourcePath, destinationPath, log)
		log.log(FINE, "javac")
		log.arguments(FINE, arguments)
		sources = [str(p) for p in sourcePath.getPreorder() if p.isFile() and p.hasSuffix(SOURCE_SUFFIX)]
		self.lastSourceCount = len(sources)
		start = time.monotonic()
		code = self.compiler.run(self.streams.stdin, self.streams.stdout, self.streams.stderr, arguments + sources)
		log.log(INFO, "%d java files compiled in %d ms", len(sources), (time.monotonic() - start) * 1000)
		return code
