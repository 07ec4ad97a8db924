"""
Regenerate the keyword recognizer for a Lox scanner: a complete Rust module with
`match_keyword`, the state machine, and a few unit tests.

Run it from the project root and redirect the output where it belongs:
	py -m example.lox_keywords > src/scanner/keyword.rs
"""
from keytrie.scanning.keyword import KeywordDFA, LOX_KEYWORDS
from keytrie.codegen import rust
from keytrie.support.printer import IndentPrinter

def build() -> KeywordDFA:
	return KeywordDFA(LOX_KEYWORDS, strict=True)

def main(stream=None):
	rust.emit_module(build(), IndentPrinter(stream), tests=True)

if __name__ == '__main__': main()
