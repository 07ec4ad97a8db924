"""
Render a finished KeywordDFA as Rust source text.

The shape of the output is fixed, because it gets pasted into (or included by)
a hand-written scanner:

	* One `consume` method, which advances `self.state` by a single character and
	  says whether it did. FINAL and FAIL refuse to move; every other state defers
	  to its own transition function.
	* One `_state_N` function per interior state, marked for inlining, which maps
	  a character to the next state number or else to FAIL.

States appear in order of allocation; within a state, arms appear in the order
their transitions were inserted. The printer does all the writing.

`emit_module` wraps the same material into a complete module with a small driver,
`match_keyword`, and optionally a test suite drawn from the inserted words.
"""

import io, warnings

from ..scanning.keyword import KeywordDFA, START, FINAL, FAIL
from ..support.interfaces import LinePrinter, PrefixConflictWarning
from ..support.printer import IndentPrinter

SIMPLE_ESCAPES = {'\\': '\\\\', '\n': '\\n', '\r': '\\r', '\t': '\\t', '\0': '\\0'}

def escape(text:str, quote:str) -> str:
	""" Escape text for the inside of a Rust literal delimited by `quote`. """
	def one(c):
		if c == quote: return '\\' + c
		if c in SIMPLE_ESCAPES: return SIMPLE_ESCAPES[c]
		if c.isprintable(): return c
		return '\\u{%x}'%ord(c)
	return ''.join(map(one, text))

def char_literal(symbol:str) -> str: return "'%s'"%escape(symbol, "'")
def str_literal(text:str) -> str: return '"%s"'%escape(text, '"')

def state_type(dfa:KeywordDFA) -> str:
	""" The narrowest unsigned integer type able to hold every state number. """
	top = max(dfa.states)
	if top <= 0xFF: return 'u8'
	if top <= 0xFFFF: return 'u16'
	return 'u32'


def emit(dfa:KeywordDFA, printer:LinePrinter):
	""" The dispatch function, followed by one transition function per interior state. """
	emit_consume(dfa, printer)
	kind = state_type(dfa)
	for q in dfa.interior_states(): emit_state(dfa, q, printer, kind)

def emit_consume(dfa:KeywordDFA, printer:LinePrinter):
	printer.line("fn consume(&mut self, t: char) -> bool {")
	with printer.indented():
		printer.line("let next_state = match self.state {")
		with printer.indented():
			for q in dfa.states:
				if q in (FINAL, FAIL): printer.line("%d => return false,"%q)
				else: printer.line("%d => _state_%d(t),"%(q, q))
			printer.line("_ => unreachable!(),")
		printer.line("};")
		printer.line("self.state = next_state;")
		printer.line("true")
	printer.line("}")

def emit_state(dfa:KeywordDFA, q:int, printer:LinePrinter, kind:str='u8'):
	printer.line("#[inline(always)]")
	printer.line("fn _state_%d(t: char) -> %s {"%(q, kind))
	with printer.indented():
		printer.line("match t {")
		with printer.indented():
			for symbol, destination in dfa.edges(q):
				printer.line("%s => %d,"%(char_literal(symbol), destination))
			printer.line("_ => %d,"%FAIL)
		printer.line("}")
	printer.line("}")


def emit_module(dfa:KeywordDFA, printer:LinePrinter, *, tests=False):
	"""
	A self-contained Rust module exposing `match_keyword(chars) -> Option<usize>`,
	which reports how many characters it took to reach FINAL, or None if the
	input hit FAIL or ran out first.

	With `tests`, a `#[cfg(test)]` module comes along. Its assertions only hold
	for an automaton free of prefix conflicts, so with conflicts it is left out.
	"""
	kind = state_type(dfa)
	printer.line("use std::iter::Iterator;")
	printer.line("")
	printer.line("pub fn match_keyword<I: Iterator<Item = char>>(chars: I) -> Option<usize> {")
	with printer.indented():
		printer.line("let mut dfa = KeywordDFA { state: %d };"%START)
		printer.line("")
		printer.line("dfa.check(chars)")
	printer.line("}")
	printer.line("")
	printer.line("struct KeywordDFA {")
	with printer.indented(): printer.line("state: %s,"%kind)
	printer.line("}")
	printer.line("")
	printer.line("impl KeywordDFA {")
	with printer.indented():
		emit_check(printer)
		printer.line("")
		printer.line("#[inline(always)]")
		emit_consume(dfa, printer)
	printer.line("}")
	printer.line("")
	for q in dfa.interior_states(): emit_state(dfa, q, printer, kind)
	if tests:
		if dfa.conflicts:
			warnings.warn("Leaving out generated tests: prefix conflicts among %r."%dfa.conflicts, PrefixConflictWarning, stacklevel=2)
		else:
			printer.line("")
			emit_tests(dfa, printer)

def emit_check(printer:LinePrinter):
	printer.line("fn check<I: Iterator<Item = char>>(&mut self, iter: I) -> Option<usize> {")
	with printer.indented():
		printer.line("let mut consumed = 0;")
		printer.line("")
		printer.line("for c in iter {")
		with printer.indented():
			printer.line("if self.consume(c) {")
			with printer.indented(): printer.line("consumed += 1;")
			printer.line("}")
			printer.line("")
			printer.line("let next_state = self.state;")
			printer.line("")
			printer.line("if next_state == %d {"%FINAL)
			with printer.indented(): printer.line("return Some(consumed);")
			printer.line("} else if next_state == %d {"%FAIL)
			with printer.indented(): printer.line("return None;")
			printer.line("}")
		printer.line("}")
		printer.line("")
		printer.line("None")
	printer.line("}")

# Characters which might begin an identifier (or a number) but not, usually, a keyword.
NON_KEYWORD_LEADS = "0123456789_$@"

def emit_tests(dfa:KeywordDFA, printer:LinePrinter):
	words = list(dict.fromkeys(dfa.words))
	printer.line("#[cfg(test)]")
	printer.line("mod tests {")
	with printer.indented():
		printer.line("use super::*;")
		printer.line("")
		printer.line("#[test]")
		printer.line("fn test_all_keywords() {")
		with printer.indented():
			printer.line("let keywords = vec![")
			with printer.indented():
				for word in words: printer.line(str_literal(word)+",")
			printer.line("];")
			printer.line("for kw in keywords {")
			with printer.indented(): printer.line("assert_eq!(match_keyword(kw.chars()), Some(kw.chars().count()));")
			printer.line("}")
		printer.line("}")
		printer.line("")
		printer.line("#[test]")
		printer.line("fn test_start_with_keyword() {")
		with printer.indented():
			for word in words:
				printer.line("assert_eq!(match_keyword(%s.chars()), Some(%d));"%(str_literal(word+"_x1"), len(word)))
		printer.line("}")
		printer.line("")
		printer.line("#[test]")
		printer.line("fn test_non_keywords() {")
		with printer.indented():
			printer.line('assert_eq!(match_keyword("".chars()), None);')
			leads = [c for c in NON_KEYWORD_LEADS if dfa.transition(START, c) == FAIL]
			if leads and words:
				printer.line("assert_eq!(match_keyword(%s.chars()), None);"%str_literal(leads[0]+words[0]))
		printer.line("}")
	printer.line("}")


def render(dfa:KeywordDFA, *, module=False, tests=False, width=4) -> str:
	""" Emit into a string rather than a stream. """
	buffer = io.StringIO()
	printer = IndentPrinter(buffer, width)
	if module: emit_module(dfa, printer, tests=tests)
	else: emit(dfa, printer)
	return buffer.getvalue()
