""" Sometimes you just need to see what's going on. """
import sys

def symbol_repr(symbol:str) -> str:
	""" Visible characters show as themselves; blanks and controls get a hex escape. """
	if symbol.isprintable() and not symbol.isspace(): return symbol
	codepoint = ord(symbol)
	if codepoint < 0x100: return '\\x%02x'%codepoint
	if codepoint < 0x10000: return '\\u%04x'%codepoint
	return '\\U%08x'%codepoint

def print_grid(grid, file=None):
	"""
	Right-justify each column, draw box lines, and add a divider below the heading row
	and after every fifth row thereafter, so long tables stay readable.
	"""
	file = sys.stdout if file is None else file
	lens = list(map(len, grid))
	assert len(set(lens)) == 1, lens
	grid = [[str(cell) for cell in row] for row in grid]
	width = [max(map(len, column)) for column in zip(*grid)]
	horizontal = '─'
	vertical = ' │ '
	upper = horizontal + '┬' + horizontal
	inner = horizontal + '┼' + horizontal
	lower = horizontal + '┴' + horizontal
	segments = [horizontal*w for w in width]
	divider = inner.join(segments)
	print(upper.join(segments), file=file)
	for r, row in enumerate(grid):
		if r %5 == 1: print(divider, file=file)
		print(vertical.join(s.rjust(w,' ') for s,w in zip(row, width)), file=file)
	print(lower.join(segments), file=file)
