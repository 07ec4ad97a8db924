"""
Generate a Rust keyword recognizer from a list of words.

The result is a character-at-a-time state machine: a `consume` method and one
small transition function per state, suitable for the keyword-matching portion
of a hand-written scanner. With no words given, the Lox keywords are used.
"""

import sys, os, argparse

from keytrie.scanning import keyword
from keytrie.scanning.keyword import KeywordDFA, LOX_KEYWORDS
from keytrie.codegen import rust
from keytrie.support.interfaces import KeywordError
from keytrie.support.printer import IndentPrinter
from keytrie.support.wordlist import read_wordlist

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m keytrie', description=__doc__,)
	parser.add_argument('words', nargs='*', help='keywords to recognize')
	parser.add_argument('-w', '--wordlist', help='path to a file with one keyword per line')
	parser.add_argument('-o', '--output', help='path to output file (default: standard output)')
	parser.add_argument('-f', '--force', action='store_true', dest='force', help='allow to write over existing file')
	parser.add_argument('-m', '--module', action='store_true', help='emit a complete module with match_keyword() and tests')
	parser.add_argument('--strict', action='store_true', help='refuse keywords which extend, or are prefixes of, other keywords')
	parser.add_argument('--pretty', action='store_true', help='display the transition table in attractive grid format')
	parser.add_argument('-v', '--verbose', action='store_true', help='squawk about states and transitions as they are made')
	return parser.parse_args(argv)

def main(args) -> int:
	if args.verbose: keyword.VERBOSE = True
	if args.output and os.path.exists(args.output) and not args.force:
		print('Target file already exists and --force command-line argument was not given.', file=sys.stderr)
		return 1
	words = list(args.words)
	try:
		if args.wordlist: words.extend(read_wordlist(args.wordlist))
		dfa = KeywordDFA(words or LOX_KEYWORDS, strict=args.strict)
	except KeywordError as e:
		print(e, file=sys.stderr)
		return 1
	if args.verbose: dfa.stats(file=sys.stderr)
	if args.pretty: dfa.display(file=sys.stdout if args.output else sys.stderr)
	if args.output:
		with open(args.output, 'w', encoding='utf-8') as fh: generate(dfa, IndentPrinter(fh), args.module)
		print('Wrote keyword recognizer to:')
		print('\t'+args.output)
	else:
		generate(dfa, IndentPrinter(sys.stdout), args.module)
	return 0

def generate(dfa, printer, module):
	if module: rust.emit_module(dfa, printer, tests=True)
	else: rust.emit(dfa, printer)

if __name__ == '__main__': sys.exit(main(parse_arguments()))
