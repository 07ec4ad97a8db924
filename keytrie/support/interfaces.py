"""
This file aggregates the exception types and abstract classes which KeyTrie deals in.

The generator has exactly one collaborator it does not own: whatever receives the
generated text, one line at a time. That's the `LinePrinter` below. Everything else
is either an error you might see, or a warning you might prefer to see.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager

class KeywordError(ValueError):
	""" Base class of all exceptions arising from the keyword machinery. """

class InvalidInput(KeywordError):
	"""
	Raised when a word cannot go into the automaton at all:
	the empty word, or a "symbol" that is not exactly one character.
	The automaton is not touched.
	"""

class PrefixConflict(KeywordError):
	"""
	Raised (in strict mode) if a word extends, or is a proper prefix of, a word already inserted.
	Parameters are:
		the offending word.
		the number of its symbols consumed along the existing path.
	"""
	def __init__(self, word, depth):
		super().__init__(word, depth)
		self.word, self.depth = word, depth
	def __str__(self):
		return "Keyword %r runs into a prefix-related keyword after %d character(s)."%(self.word, self.depth)

class WordListError(KeywordError):
	""" Something wrong in the text of a keyword list. The message says where. """

class PrefixConflictWarning(UserWarning):
	"""
	Issued in place of PrefixConflict when not in strict mode.
	The word still goes in, the same way it always has, but it will not be recognized on its own merits.
	"""


class LinePrinter(ABC):
	"""
	The code emitter writes through one of these. It knows nothing of files or strings;
	it only knows that lines come out in order, and that nesting means indentation.
	"""

	@abstractmethod
	def line(self, text:str):
		""" Write one line at the current indentation, followed by a line break. """

	@abstractmethod
	def block(self):
		""" Subsequent lines go one level deeper, until the matching block_end(). """

	@abstractmethod
	def block_end(self):
		""" Return to the enclosing level. At the outermost level, this does nothing. """

	@contextmanager
	def indented(self):
		""" Scoped form of block() ... block_end(). """
		self.block()
		try: yield self
		finally: self.block_end()
