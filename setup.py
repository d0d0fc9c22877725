"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='lukas-rpn',
	version='0.1.0',
	packages=['lukas', ],
	entry_points={
		'console_scripts': ["lukas = lukas.cmdline:main"],
	},
	license='MIT',
	description='A line-oriented postfix arithmetic evaluator named for Polish logician Jan Łukasiewicz',
	long_description=open('README.md', encoding='utf-8').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
