import unittest
import io, os, warnings, importlib.util

from keytrie.scanning.keyword import KeywordDFA
from keytrie.support import wordlist
from keytrie.support.interfaces import PrefixConflictWarning

EXAMPLE_FOLDER = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'example')

def load_example(name):
	spec = importlib.util.spec_from_file_location('example.'+name, os.path.join(EXAMPLE_FOLDER, name+'.py'))
	module = importlib.util.module_from_spec(spec)
	spec.loader.exec_module(module)
	return module

class TestLoxKeywords(unittest.TestCase):
	def test_00_module(self):
		out = io.StringIO()
		with warnings.catch_warnings():
			warnings.simplefilter("error")
			load_example("lox_keywords").main(out)
		text = out.getvalue()
		self.assertIn("            45 => _state_45(t),\n", text)
		self.assertIn('            "while",\n', text)
		self.assertIn('        assert_eq!(match_keyword("fun_x1".chars()), Some(3));\n', text)

class TestCKeywords(unittest.TestCase):
	def test_00_one_conflict(self):
		words = wordlist.read_wordlist(os.path.join(EXAMPLE_FOLDER, 'c_keywords.txt'))
		self.assertEqual(32, len(words))
		with self.assertWarns(PrefixConflictWarning):
			dfa = KeywordDFA(words)
		self.assertEqual(['double'], dfa.conflicts)

if __name__ == '__main__':
	unittest.main()
