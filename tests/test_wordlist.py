import unittest
import os, tempfile

from keytrie.support import wordlist
from keytrie.support.interfaces import WordListError, KeywordError

SAMPLE = """\
# Reserved words

and
  class
else	# not a comment: two words on one line
"""

class TestWordList(unittest.TestCase):
	def test_00_words_comments_and_blanks(self):
		self.assertEqual(['and', 'class', 'else'], wordlist.parse_wordlist("# Reserved\n\nand\n  class  \nelse\n"))

	def test_01_two_words_on_a_line(self):
		with self.assertRaises(WordListError) as cm:
			wordlist.parse_wordlist(SAMPLE, filename='lox.txt')
		message = str(cm.exception)
		assert isinstance(cm.exception, KeywordError)
		self.assertTrue(message.startswith("lox.txt: line 5, column 6: Expected one keyword per line."), message)
		self.assertIn(" >>> else\t# not a comment", message)
		self.assertIn("\n         \t^ near here", message)

	def test_02_unnamed_source(self):
		with self.assertRaises(WordListError) as cm:
			wordlist.parse_wordlist("if then")
		self.assertTrue(str(cm.exception).startswith("At line 1, column 4:"))

	def test_03_illustration(self):
		self.assertEqual("abc def\n    ^^^ here", wordlist.illustration("abc def", 4, 3, caption="here"))
		self.assertEqual("abc\n   ^ near here", wordlist.illustration("abc", 3))

	def test_04_read_file(self):
		with tempfile.TemporaryDirectory() as folder:
			path = os.path.join(folder, 'words.txt')
			with open(path, 'w', encoding='utf-8') as fh: fh.write("fn\nlet\n# done\n")
			self.assertEqual(['fn', 'let'], wordlist.read_wordlist(path))

if __name__ == '__main__':
	unittest.main()
