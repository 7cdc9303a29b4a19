import setuptools

setuptools.setup(
	name='signet-parser',
	version='0.1.0',
	packages=[
		'signetparse',
		'signetparse.parsing',
		'signetparse.scanning',
		'signetparse.support',
	],
	description='Parse the signet notation for function signatures into plain Python structures',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
