import setuptools

setuptools.setup(
	name='keytrie',
	version='0.1.0',
	packages=[
		'keytrie',
		'keytrie.codegen',
		'keytrie.scanning',
		'keytrie.support',
	],
	description='Generate character-at-a-time keyword recognizers for hand-written scanners',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Code Generators",
		"Development Status :: 3 - Alpha",
    ],
)
