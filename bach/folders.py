import enum
import pathlib
from typing import Dict, Iterator, Tuple
from bach.workspace import Module

class Folder(enum.Enum):
	"""
	The named locations a build knows about.
	Each has a default path segment, and a list of parents the segment is relative to.
	Parents are referred to by name, so the set stays closed and acyclic.
	"""
	DEPENDENCIES = ("dependencies",)
	SOURCE = ("src",)
	TARGET = ("target/bach",)
	TARGET_MAIN = ("main", "TARGET")
	TARGET_MAIN_SOURCE = ("module-source-path", "TARGET_MAIN")
	TARGET_MAIN_RESOURCES = ("resources", "TARGET_MAIN")
	TARGET_MAIN_COMPILED = ("compiled", "TARGET_MAIN")
	TARGET_TEST = ("test", "TARGET")
	TARGET_TEST_SOURCE = ("module-source-path", "TARGET_TEST")
	TARGET_TEST_RESOURCES = ("resources", "TARGET_TEST")
	TARGET_TEST_COMPILED = ("compiled", "TARGET_TEST")

	def __init__(self, path, *parents):
		self.path = pathlib.Path(path)
		self._parentNames = parents

	@property
	def parents(self) -> Tuple['Folder', ...]:
		return tuple(Folder[p] for p in self._parentNames)

class Folders(Module):
	"""
	The folder table of a build session.
	Paths are resolved late, so changing a folder affects every folder below it.
	"""
	def __init__(self, context) -> None:
		super().__init__(context)
		self.__paths : Dict[Folder,pathlib.Path] = {f : f.path for f in Folder}

	def set(self, folder : Folder, path):
		self.__paths[folder] = pathlib.Path(path)

	def get(self, folder : Folder) -> pathlib.Path:
		if not folder.parents:
			return self.__paths[folder]
		path = pathlib.Path()
		for p in folder.parents:
			path = path.joinpath(self.get(p))
		return path.joinpath(self.__paths[folder])

	def items(self) -> Iterator[Tuple[Folder,pathlib.Path]]:
		return ((f,self.get(f)) for f in Folder)
