
class BuildException(Exception):
	def __init__(self, message = ""):
		super().__init__(message)
		self.__message = message

	@property
	def message(self):
		return self.__message

	def report(self):
		print(self.__message)
