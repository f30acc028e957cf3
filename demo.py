from bach.bach import Bach
from bach.folders import Folder
from bach.layout import Layout
from bach.log import INFO, configureConsole
from bach.exceptions import BuildException

configureConsole()

try:
	for (name,layout) in [("basic",Layout.BASIC),("common",Layout.COMMON)]:
		print(f"\n{name.upper()}\n")
		Bach(INFO, layout) \
			.set(Folder.SOURCE, f"demo/{name}") \
			.set(Folder.TARGET, f"target/bach/{name}") \
			.compile() \
			.run("com.greetings", "com.greetings.Main")
except BuildException as x:
	x.report()
