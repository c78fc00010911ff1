import setuptools

with open("README.md", "r") as fh:
	long_description = fh.read()

setuptools.setup(
	name = "dspsignals",
	version = "0",
	author = "Matias Senger",
	author_email = "m.senger@hotmail.com",
	description = "Continuous and discrete signals with a small transform algebra",
	long_description = long_description,
	long_description_content_type = "text/markdown",
	url = "https://github.com/SengerM/signals",
	packages = setuptools.find_packages(exclude=['tests']),
	install_requires = [
		'numpy',
		'scipy',
	],
	extras_require = {
		'test': ['pytest'],
	},
	classifiers = [
		"Programming Language :: Python :: 3",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
	],
)
