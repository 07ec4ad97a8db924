"""
Keyword lists come from plain text: one word per line. Blank lines are fine, and so
are lines beginning with '#', which are comments. Whitespace around a word is dropped.

Two words on one line is almost certainly a mistake (did someone paste a sentence?)
so rather than guess, we complain, and show where.
"""

import re

from .interfaces import WordListError

WORD = re.compile(r'\S+')

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline = '^' * max(1, min(width, len(single_line)-start))
	return prefix + single_line.rstrip() + '\n' + blanks + underline + " " + caption

def complaint(filename, row:int, col:int, width:int, line:str, message:str) -> str:
	prefix = "At" if filename is None else str(filename)+":"
	reference = "%s line %d, column %d: %s" % (prefix, row, col + 1, message)
	return "%s\n%s" % (reference, illustration(line, col, width, prefix=' >>> '))

def parse_wordlist(text:str, filename:str=None) -> list:
	words = []
	for row, line in enumerate(text.splitlines(), 1):
		found = WORD.findall(line)
		if not found or found[0].startswith('#'): continue
		if len(found) > 1:
			extra = list(WORD.finditer(line))[1]
			raise WordListError(complaint(filename, row, extra.start(), extra.end()-extra.start(), line, "Expected one keyword per line."))
		words.append(found[0])
	return words

def read_wordlist(path) -> list:
	with open(path, encoding='utf-8') as fh: text = fh.read()
	return parse_wordlist(text, filename=path)
