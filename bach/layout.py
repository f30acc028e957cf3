import enum
from typing import List
from bach.path import Path
from bach.folders import Folder, Folders
from bach.log import TaggedLog, CONFIG
from bach.languages.java import JavaCompilation, MODULE_DESCRIPTOR, TEST_MODULE_DESCRIPTOR
from bach.tree import cleanTree, copyTree, moveFile
from bach.exceptions import BuildException

class Layout(enum.Enum):
	BASIC = "src/<module>"
	COMMON = "src/[main|test]/[java|resources]/<module>"
	TILED = "src/<module>/[main|test]/[java|resources]"

class LayoutPipeline():
	"""
	Runs the compile steps a layout needs, in order.
	Returns the compiler status of every step.
	"""
	def __init__(self, layout : Layout, folders : Folders, compilation : JavaCompilation):
		self.layout = layout
		self.folders = folders
		self.compilation = compilation

	def compileAll(self, log : TaggedLog) -> List[int]:
		modules = self.folders.get(Folder.SOURCE)
		if not Path(modules).isPresent():
			raise BuildException(f"folder source `{modules}` does not exist")
		if not isinstance(self.layout, Layout):
			raise BuildException(f"unsupported module source path layout {self.layout} for: `{modules}`")
		target = self.folders.get(Folder.TARGET)
		cleanTree(target, False, log)
		cleanTree(target, True, log)
		match self.layout:
			case Layout.BASIC:
				return self.__compileBasic(modules, log)
			case Layout.COMMON:
				return self.__compileCommon(modules, log)
			case Layout.TILED:
				return self.__compileTiled(modules, log)

	def __compile(self, source : Folder, destination : Folder, log : TaggedLog) -> int:
		return self.compilation.compile(self.folders.get(source), self.folders.get(destination), log)

	def __compileBasic(self, modules, log : TaggedLog):
		log.info("main")
		return [self.compilation.compile(modules, self.folders.get(Folder.TARGET_MAIN_COMPILED), log)]

	def __compileCommon(self, modules, log : TaggedLog):
		log.info("main")
		codes = [self.compilation.compile(modules / "main/java", self.folders.get(Folder.TARGET_MAIN_COMPILED), log)]
		log.info("test")
		# Tests see main classes as part of the same modules.
		copyTree(modules / "main/java", self.folders.get(Folder.TARGET_TEST_SOURCE), log)
		copyTree(modules / "test/java", self.folders.get(Folder.TARGET_TEST_SOURCE), log)
		codes.append(self.__compile(Folder.TARGET_TEST_SOURCE, Folder.TARGET_TEST_COMPILED, log))
		return codes

	def __compileTiled(self, modules, log : TaggedLog):
		for p in Path(modules).getChildren(deterministic = True):
			if p.isDirectory():
				self.prepareModule(modules, p.getName(), log)
		log.info("main")
		codes = [self.__compile(Folder.TARGET_MAIN_SOURCE, Folder.TARGET_MAIN_COMPILED, log)]
		log.info("test")
		codes.append(self.__compile(Folder.TARGET_TEST_SOURCE, Folder.TARGET_TEST_COMPILED, log))
		return codes

	def prepareModule(self, modules, module : str, log : TaggedLog):
		"""
		Gather <module>/[main|test]/[java|resources] into the module source paths of the target.
		"""
		log.log(CONFIG, "prepare %s", module)
		source = Path(modules).resolve(module)
		testSource = self.folders.get(Folder.TARGET_TEST_SOURCE) / module
		copyTree(source.resolve("main/java"), self.folders.get(Folder.TARGET_MAIN_SOURCE) / module, log)
		copyTree(source.resolve("main/resources"), self.folders.get(Folder.TARGET_MAIN_RESOURCES) / module, log)
		copyTree(source.resolve("test/java"), testSource, log)
		copyTree(source.resolve("test/resources"), self.folders.get(Folder.TARGET_TEST_RESOURCES) / module, log)
		moveFile(testSource, TEST_MODULE_DESCRIPTOR, MODULE_DESCRIPTOR, log)
