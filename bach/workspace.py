from typing import Any, Dict, Final, TypeVar, Type

class ModuleInitContext():
	def __init__(self, workspace : 'Workspace') -> None:
		self._workspace = workspace

class Module():
	"""
	A capability registered in a Workspace.
	Subclasses sharing the same key replace each other.
	"""
	key : Any

	def __init__(self, context : ModuleInitContext) -> None:
		self.ws : Final[Workspace] = context._workspace

	def __init_subclass__(cls) -> None:
		if "key" not in cls.__dict__:
			setattr(cls,"key",cls)

class Workspace:
	'''
	The set of capabilities belonging to one build session.

	Use use() to register a replacement implementation for a module,
	then add() to activate it. Once a key is active, every lookup of
	that key returns the same instance, regardless of which subclass
	it was looked up with.

	Workspaces do not share state, so any number of build sessions may coexist.
	'''
	T = TypeVar("T",bound = Module)

	def __init__(self):
		self.__activeModules : Dict[object,Module] = {}
		self.__inactiveModules : Dict[object,type] = {}

	def __getitem__(self,mod : Type[T]) -> T:
		'''Fetch a specific module.'''
		realMod = self.__activeModules[mod.key]
		assert realMod is not None
		return realMod

	def __contains__(self,mod : Type[T]) -> bool:
		if mod.key in self.__activeModules:
			return isinstance(self.__activeModules[mod.key],mod)
		return False

	def use(self,mod : Type[T]):
		'''
		Register the specific module as a non-default implementation.
		The module is only activated when its key is added.
		'''
		assert issubclass(mod, Module), "Only subclasses of Module are accepted!"
		key = mod.key
		assert key is not None, "key may not be None"
		assert key not in self.__inactiveModules and key not in self.__activeModules, \
			"use() or add() was already invoked for this module!"
		self.__inactiveModules[key] = mod
		return mod

	def add(self,mod : Type[T]) -> T:
		'''
		Register and activate the specific module.
		The module instance is returned.
		'''
		assert issubclass(mod, Module), "Only subclasses of Module are accepted!"
		key = mod.key
		assert key is not None, "key may not be None"
		if key in self.__activeModules:
			assert self.__activeModules[key] is not None, f"Recursive call to add() with key {key}!"
			return self.__activeModules[key]
		mod = self.__inactiveModules.pop(key, mod)
		self.__activeModules[key] = None
		ins = mod(ModuleInitContext(self))
		self.__activeModules[key] = ins
		return ins
