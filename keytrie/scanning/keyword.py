"""
A keyword recognizer is about the simplest finite automaton worth generating.
Given a fixed list of words, fold each one into a shared prefix tree: follow
whatever path already exists, and make new states only where the word strikes
out on its own. The result is deterministic by construction, since no two
transitions ever compete for the same (state, symbol) pair. It is NOT minimal:
subtrees with identical futures are never merged. For a few dozen keywords,
who cares?

Three state numbers are spoken for before the first word goes in:
	START (0) is where matching begins;
	FINAL (1) means the characters so far spell out exactly one keyword;
	FAIL (2) is the sink for anything else.
Every other state is interior, numbered in order of creation from 3 on up.

There is one wrinkle. FINAL is a single state shared by every accepted word.
Suppose you insert "in" and then "int". The path for "int" runs right through
FINAL, and the 't' transition gets hung off FINAL itself, where every word
ending there can see it. Going the other way ("int", then "in") leaves "in"
ending on an interior state, which is never accepting. Either way, one of the
two words won't be recognized on its own merits. That's a "prefix conflict".
Generated code must stay the same as it always was, so the structure is not
altered; instead, conflicts are reported: by warning, or in strict mode by
refusing the word outright.
"""

import sys, warnings
from collections import deque
from typing import NamedTuple, Iterable, Optional

from ..support import pretty
from ..support.interfaces import InvalidInput, PrefixConflict, PrefixConflictWarning

START, FINAL, FAIL = 0, 1, 2

VERBOSE = False

LOX_KEYWORDS = (
	"and", "class", "else", "false", "for", "fun", "if", "nil",
	"or", "print", "return", "super", "this", "true", "var", "while",
)

class Transition(NamedTuple):
	source: int
	symbol: str
	destination: int

def state_name(q:int) -> str:
	return {FINAL: 'FINAL', FAIL: 'FAIL'}.get(q, str(q))

class KeywordDFA:
	"""
	Build one of these with the words to recognize, or insert them one at a time.
	Either way, all insertions must finish before the code emitter gets to look.

	states: every state id, in order of allocation. START, FINAL, FAIL come first.
	transitions: every Transition, in order of insertion. This order determines
		the order of arms in generated code, but has no effect on what matches.
	words: the words inserted, in order.
	conflicts: those words which turned out to be prefix conflicts.
	"""
	def __init__(self, words:Iterable=(), *, strict=False):
		self.strict = strict
		self.states = [START, FINAL, FAIL]
		self.transitions = []
		self.words = []
		self.conflicts = []
		self.__delta = {}
		for word in words: self.insert(word)

	def __new_state(self) -> int:
		q = len(self.states)
		self.states.append(q)
		return q

	def __conflict_depth(self, symbols:list) -> Optional[int]:
		"""
		Walk the existing path for a word without changing anything.
		Return the number of symbols consumed where the word turns out to
		be a prefix conflict, or None if it isn't one.
		"""
		q = START
		for depth, symbol in enumerate(symbols):
			if q == FINAL: return depth
			q = self.__delta.get((q, symbol))
			if q is None: return None
		return None if q == FINAL else len(symbols)

	def insert(self, word):
		"""
		Fold one word into the automaton. The word is a string, or else any
		sequence of one-character strings. Nothing changes if this raises.
		"""
		symbols = list(word)
		if not symbols: raise InvalidInput("Cannot insert an empty word.")
		for symbol in symbols:
			if not (isinstance(symbol, str) and len(symbol) == 1):
				raise InvalidInput("Word %r contains %r, which is not a single character."%(word, symbol))
		spelling = ''.join(symbols)
		depth = self.__conflict_depth(symbols)
		if depth is not None:
			if self.strict: raise PrefixConflict(spelling, depth)
			warnings.warn("Keyword %r conflicts with a prefix-related keyword after %d character(s); it will not be recognized by itself."%(spelling, depth), PrefixConflictWarning, stacklevel=2)
			self.conflicts.append(spelling)
		q = START
		last = len(symbols) - 1
		for i, symbol in enumerate(symbols):
			key = (q, symbol)
			if key not in self.__delta:
				target = FINAL if i == last else self.__new_state()
				self.__delta[key] = target
				self.transitions.append(Transition(q, symbol, target))
				if VERBOSE: print("%r: %s --%r--> %s"%(spelling, state_name(q), symbol, state_name(target)), file=sys.stderr)
			q = self.__delta[key]
		self.words.append(spelling)

	def transition(self, state:int, symbol:str) -> int:
		""" The delta function. Anything not expressly inserted goes to FAIL. """
		return self.__delta.get((state, symbol), FAIL)

	def interior_states(self) -> list:
		""" Those states which get a transition function of their own: START and everything after FAIL. """
		return [q for q in self.states if q not in (FINAL, FAIL)]

	def edges(self, state:int) -> list:
		return [(t.symbol, t.destination) for t in self.transitions if t.source == state]

	def reachable(self) -> set:
		""" Breadth-first search from START over recorded transitions. """
		successors = {}
		for t in self.transitions: successors.setdefault(t.source, []).append(t.destination)
		seen = {START}
		queue = deque(seen)
		while queue:
			for q in successors.get(queue.popleft(), ()):
				if q not in seen:
					seen.add(q)
					queue.append(q)
		return seen

	def stats(self, file=None):
		print("%d words (%d in conflict), %d states (%d interior), %d transitions."%(
			len(self.words), len(self.conflicts), len(self.states), len(self.interior_states()), len(self.transitions),
		), file=file or sys.stdout)

	def display(self, file=None):
		head = ['', 'From', 'Symbol', 'To']
		body = [[i, state_name(t.source), pretty.symbol_repr(t.symbol), state_name(t.destination)] for i, t in enumerate(self.transitions)]
		pretty.print_grid([head] + body, file=file)
