FRAMES_PER_SECOND = 75

class Position:
	"""Disc time: minutes, seconds and frames (75 frames per second).

	Values are kept as given; out of range seconds or frames are not
	normalized, so a position always renders the way it was read.
	"""

	def __init__(self, minutes = 0, seconds = 0, frames = 0):
		self.minutes = minutes
		self.seconds = seconds
		self.frames = frames

	@classmethod
	def from_samples(cls, sample, rate):
		total = sample // rate
		frames = (sample % rate) * FRAMES_PER_SECOND // rate

		return cls(total // 60, total % 60, frames)

	@classmethod
	def from_frames(cls, count):
		seconds, frames = divmod(count, FRAMES_PER_SECOND)
		minutes, seconds = divmod(seconds, 60)

		return cls(minutes, seconds, frames)

	@property
	def total_frames(self):
		return self.frames + FRAMES_PER_SECOND * (self.seconds + 60 * self.minutes)

	def iszero(self):
		return self.minutes == 0 and self.seconds == 0 and self.frames == 0

	def _key(self):
		return (self.minutes, self.seconds, self.frames)

	def __eq__(self, other):
		if not isinstance(other, Position):
			return NotImplemented
		return self._key() == other._key()

	def __lt__(self, other):
		if not isinstance(other, Position):
			return NotImplemented
		return self.total_frames < other.total_frames

	def __hash__(self):
		return hash(self._key())

	def __str__(self):
		return "%02d:%02d:%02d" % self._key()

	def __repr__(self):
		return "Position(%d, %d, %d)" % self._key()
