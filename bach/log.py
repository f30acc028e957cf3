import logging
import sys
from typing import Final
from bach.workspace import Module

SEVERE = logging.ERROR
WARNING = logging.WARNING
INFO = logging.INFO
CONFIG = 15
FINE = logging.DEBUG
FINER = 7
FINEST = 5

logging.addLevelName(CONFIG, "CONFIG")
logging.addLevelName(FINER, "FINER")
logging.addLevelName(FINEST, "FINEST")

# Names as printed.
LEVEL_NAMES = {
	SEVERE : "severe",
	WARNING : "warning",
	INFO : "info",
	CONFIG : "config",
	FINE : "fine",
	FINER : "finer",
	FINEST : "finest",
}

LOGGER_NAME = "bach"

def configureConsole(stream = None):
	"""
	Print bach messages as they are, without any logging decoration.
	"""
	handler = logging.StreamHandler(sys.stdout if stream is None else stream)
	handler.setFormatter(logging.Formatter("%(message)s"))
	logger = logging.getLogger(LOGGER_NAME)
	logger.addHandler(handler)
	logger.propagate = False
	return handler

class LogContext():
	"""
	Where a message comes from (tag) and how much of it to show (threshold).
	Immutable. Use withTag() and withThreshold() to derive new contexts.
	"""
	__slots__ = ("tag","threshold")

	def __init__(self, tag : str, threshold : int):
		object.__setattr__(self, "tag", tag)
		object.__setattr__(self, "threshold", threshold)

	def __setattr__(self, name, value):
		raise AttributeError("LogContext is immutable")

	def __eq__(self, other):
		return isinstance(other,LogContext) and (self.tag,self.threshold) == (other.tag,other.threshold)

	def __hash__(self):
		return hash((self.tag,self.threshold))

	def __repr__(self):
		return f"LogContext({self.tag!r},{logging.getLevelName(self.threshold)})"

	def withTag(self, tag : str) -> 'LogContext':
		return LogContext(tag, self.threshold)

	def withThreshold(self, threshold : int) -> 'LogContext':
		return LogContext(self.tag, threshold)

	def accepts(self, level : int) -> bool:
		return self.threshold <= level

class TaggedLog():
	"""
	A sink bound to a context. This is what components receive.
	"""
	def __init__(self, sink : logging.Logger, context : LogContext):
		self.sink : Final[logging.Logger] = sink
		self.context : Final[LogContext] = context

	@property
	def threshold(self):
		return self.context.threshold

	def tag(self, tag : str) -> 'TaggedLog':
		if tag == self.context.tag:
			return self
		log = TaggedLog(self.sink, self.context.withTag(tag))
		log.log(CONFIG, "")
		return log

	def level(self, threshold : int) -> 'TaggedLog':
		return TaggedLog(self.sink, self.context.withThreshold(threshold))

	def __prefix(self, level):
		prefix = f"{self.context.tag:>7} "
		if self.context.threshold < INFO:
			prefix += f"{LEVEL_NAMES.get(level, logging.getLevelName(level).lower()):>6}| "
		return prefix.replace("%","%%")

	def log(self, level : int, msg : str, *args):
		if not self.context.accepts(level):
			return
		self.sink.log(level, self.__prefix(level) + msg, *args)

	def info(self, msg : str, *args):
		self.log(INFO, msg, *args)

	def arguments(self, level : int, arguments):
		"""Log a command line, one argument per line, options indented."""
		for a in arguments:
			self.log(level, "%s%s", "  " if str(a).startswith("-") else "", a)

class Log(Module):
	"""
	Holds the sink of the session. The sink accepts every level,
	filtering is done by the LogContext of each TaggedLog.
	"""
	def __init__(self, context) -> None:
		super().__init__(context)
		self.sink : logging.Logger = logging.getLogger(LOGGER_NAME)
		self.sink.setLevel(1)

	def bind(self, tag : str, threshold : int) -> TaggedLog:
		return TaggedLog(self.sink, LogContext(tag, threshold))
