import pathlib
from typing import List
from bach.workspace import Workspace
from bach.folders import Folder, Folders
from bach.log import Log, TaggedLog, CONFIG, FINE, LEVEL_NAMES
from bach.languages.java import JavaCompiler, JavaCompilation, StandardStreams
from bach.layout import Layout, LayoutPipeline
from bach.process import ProcessLauncher, Runner
from bach.tree import cleanTree

class Bach():
	"""
	Java Shell Builder.

	Holds the configuration of one build session: the folder table,
	the log level and the layout. Use it as

		Bach(INFO, Layout.BASIC).set(Folder.SOURCE, "demo/basic").compile().run(module, main)

	Replacement compilers and launchers are registered on the workspace
	before it is handed to the constructor.
	"""
	def __init__(self, level : int = FINE, layout : Layout = Layout.COMMON, workspace : Workspace = None):
		assert layout is not None, "layout must not be null"
		self.ws = Workspace() if workspace is None else workspace
		self.__layout = layout
		self.folders = self.ws.add(Folders)
		self.compiler = self.ws.add(JavaCompiler)
		self.launcher = self.ws.add(ProcessLauncher)
		self.compilation = JavaCompilation(self.compiler, self.folders, StandardStreams())
		self.lastCompileCodes : List[int] = []
		self.log : TaggedLog = self.ws.add(Log).bind("init", level)
		self.log.info("%s initialized", type(self).__name__)
		self.log.log(CONFIG, "level=%s", LEVEL_NAMES.get(level, level))
		self.log.log(CONFIG, "layout=%s", layout.name if isinstance(layout, Layout) else layout)
		self.log.log(CONFIG, "pwd=`%s`", pathlib.Path(".").absolute())
		self.logFolders()

	@property
	def layout(self):
		return self.__layout

	@property
	def streams(self) -> StandardStreams:
		return self.compilation.streams

	@streams.setter
	def streams(self, streams : StandardStreams):
		self.compilation.streams = streams

	def set(self, folder : Folder, path) -> 'Bach':
		self.folders.set(folder, path)
		return self

	def get(self, folder : Folder) -> pathlib.Path:
		return self.folders.get(folder)

	def setLevel(self, level : int) -> 'Bach':
		self.log = self.log.level(level)
		return self

	def logFolders(self):
		for (f,p) in self.folders.items():
			self.log.log(CONFIG, "folder %s -> %s", f.name, p)

	def clean(self) -> 'Bach':
		self.log = self.log.tag("clean")
		cleanTree(self.get(Folder.TARGET), False, self.log)
		return self

	def compile(self) -> 'Bach':
		self.log = self.log.tag("compile")
		self.logFolders()
		pipeline = LayoutPipeline(self.__layout, self.folders, self.compilation)
		self.lastCompileCodes = pipeline.compileAll(self.log)
		return self

	def compileModules(self, moduleSourcePath, destinationPath) -> int:
		return self.compilation.compile(moduleSourcePath, destinationPath, self.log)

	def jar(self) -> int:
		raise NotImplementedError("jar() not implemented, yet")

	def run(self, module : str, main : str) -> int:
		self.log = self.log.tag("run")
		return Runner(self.launcher, self.folders, self.streams).run(module, main, self.log)
