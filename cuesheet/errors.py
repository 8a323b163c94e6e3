class CueError(Exception):
	pass

class DecodeError(CueError):
	pass

class FlacError(CueError):
	pass
