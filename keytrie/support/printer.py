""" An indentation-aware line writer: the usual collaborator for the code emitter. """

import sys
from typing import TextIO

from .interfaces import LinePrinter

class IndentPrinter(LinePrinter):
	"""
	One cursor, one depth counter. Blocks nest by bumping the counter,
	so nothing gets allocated per level.

	Blank lines come out truly blank, with no trailing indentation.
	"""
	def __init__(self, stream:TextIO=None, width:int=4):
		self.stream = sys.stdout if stream is None else stream
		self.width = width
		self.depth = 0

	def line(self, text:str):
		if text: self.stream.write(' ' * (self.depth * self.width) + text + '\n')
		else: self.stream.write('\n')

	def block(self):
		self.depth += 1

	def block_end(self):
		if self.depth > 0: self.depth -= 1
