import os
import pathlib
import shutil
from typing import Final, Hashable, Iterator

class Path(Hashable):
	"""
	Represents an absolute file Path.
	This always uses forward slash '/' for separators.
	Symbolic links are never resolved, so operations act on the link itself.
	"""
	__p: Final[pathlib.Path]
	def __new__(cls,path):
		if cls is Path and type(path) is Path:
			return path
		self = super().__new__(cls)
		if isinstance(path,Path):
			self.__p = path.__p
			self.__s = path.__s
		else:
			self.__p = pathlib.Path(os.path.abspath(path))
			self.__s = None
		return self

	def __hash__(self):
		return self.__p.__hash__()

	def __eq__(self,other):
		return isinstance(other,Path) and self.__p == other.__p

	def __lt__(self,other):
		return str(self) < str(other)

	def __gt__(self,other):
		return str(self) > str(other)

	def __str__(self):
		s = self.__s
		if s is None:
			s = self.__p.as_posix()
			self.__s = s
		return s

	def __repr__(self):
		return f"Path(\'{str(self)}\')"

	def hasSuffix(self,suffix : str) -> bool:
		return self.__p.name.endswith(suffix)

	def resolve(self,subpath) -> 'Path':
		return Path(self.__p.joinpath(subpath))

	def relativeTo(self,other: 'Path') -> 'RelativePath':
		return RelativePath(self,self.__p.relative_to(other.__p))

	def getName(self) -> str:
		"""
		The last path element. The file name including extensions.
		"""
		return self.__p.name

	def opCreateDirectory(self):
		self.__p.mkdir()

	def opCreateDirectories(self):
		self.__p.mkdir(parents = True, exist_ok = True)

	def opDeleteFile(self):
		self.__p.unlink()

	def opDeleteDirectory(self):
		self.__p.rmdir()

	def opDelete(self):
		if self.isDirectory():
			self.opDeleteDirectory()
		else:
			self.opDeleteFile()

	def opCopyTo(self,other : 'Path'):
		shutil.copyfile(src=str(self),dst=str(other))
		shutil.copymode(src=str(self),dst=str(other))

	def opMoveTo(self,other : 'Path'):
		if other.isPresent():
			raise FileExistsError(f"{other} already exists")
		self.__p.rename(other.__p)

	def isDirectory(self,followLinks = False):
		return self.__p.is_dir() and (followLinks or not self.__p.is_symlink())

	def isFile(self):
		return self.__p.is_file()

	def isPresent(self):
		return os.path.lexists(self.__p)

	def getChildren(self,deterministic = False) -> Iterator['Path']:
		"""
		A generator producing the direct children of this Path.
		"""
		if deterministic:
			return iter(sorted(Path(p) for p in self.__p.iterdir()))
		else:
			return (Path(p) for p in self.__p.iterdir())

	def getPreorder(self,includeSelf = True,deterministic = False,followLinks = False) -> Iterator['Path']:
		"""
		A generator producing all subpaths of this path in preorder.
		All paths are encountered before any of their subpaths.
		Linked directories are only entered if followLinks is set.
		"""
		if includeSelf:
			yield self
		if self.isDirectory(followLinks):
			for f in self.getChildren(deterministic = deterministic):
				yield from f.getPreorder(includeSelf = True,deterministic = deterministic,followLinks = followLinks)

	def getIr(self) -> pathlib.Path:
		return self.__p

class RelativePath(Path):
	"""
	Still represents an absolute file path, but has a relative part for reference.
	"""
	def __new__(cls, path, subpath):
		self = super().__new__(cls, path)
		self._subpath = pathlib.PurePath(subpath)
		return self

	def moveTo(self,target: Path) -> 'RelativePath':
		return RelativePath(target.getIr().joinpath(self._subpath),self._subpath)

	def relativeStr(self):
		return self._subpath.as_posix()

	def __repr__(self):
		return f"RelativePath({repr(str(self))},{repr(self.relativeStr())})"
