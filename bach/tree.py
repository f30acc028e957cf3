from bach.path import Path
from bach.exceptions import BuildException
from bach.log import TaggedLog, FINE

def cleanTree(root, keepRoot : bool, log : TaggedLog) -> Path:
	"""
	Delete everything below root, and root itself unless keepRoot is set.
	A missing root is created if keepRoot is set.
	"""
	root = Path(root)
	if not root.isPresent():
		if keepRoot:
			try:
				root.opCreateDirectories()
			except OSError as e:
				raise BuildException(f"Creating `{root}` failed: {e}") from e
		return root
	# Reverse path order visits every entry before its parent directory.
	for p in sorted(root.getPreorder(includeSelf = not keepRoot), reverse = True):
		try:
			p.opDelete()
		except FileNotFoundError:
			pass
		except OSError as e:
			raise BuildException(f"Deleting `{p}` failed: {e}") from e
	log.log(FINE, "deleted tree `%s`", root)
	return root

def copyTree(source, target, log : TaggedLog):
	"""
	Mirror source into target, following links. Existing files are overwritten.
	"""
	source = Path(source)
	target = Path(target)
	if not source.isPresent():
		return
	log.log(FINE, "copy `%s` to `%s`", source, target)
	try:
		target.opCreateDirectories()
		for p in source.getPreorder(includeSelf = False, deterministic = True, followLinks = True):
			t = p.relativeTo(source).moveTo(target)
			if p.isDirectory(followLinks = True):
				try:
					t.opCreateDirectory()
				except FileExistsError:
					if not t.isDirectory():
						raise
			else:
				p.opCopyTo(t)
	except OSError as e:
		raise BuildException(f"Copying {source} to {target} failed: {e}") from e

def moveFile(directory, fromName : str, toName : str, log : TaggedLog):
	"""
	Rename a file inside directory, if both exist.
	"""
	directory = Path(directory)
	if not directory.isDirectory():
		return
	source = directory.resolve(fromName)
	if not source.isPresent():
		return
	try:
		source.opMoveTo(directory.resolve(toName))
	except OSError as e:
		raise BuildException(f"Moving {fromName} failed: {directory}") from e
	log.log(FINE, "moved `%s` to `%s`", source, toName)
