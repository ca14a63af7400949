"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='typegen',
	version='0.1.0',
	packages=['typegen'],
	entry_points={
		'console_scripts': ["typegen = typegen.cmdline:main"],
	},
	license='MIT',
	description='A type-directed random program generator for fuzzing structural type checkers',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Testing",
		"Topic :: Software Development :: Compilers",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
