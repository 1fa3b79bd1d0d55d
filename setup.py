from setuptools import setup, find_packages
import sys

if sys.version_info[:2] < (3, 7):
    sys.stdout.write('Python 3.7 or later is required\n')
    sys.exit(1)

setup(
    name='friends',
    version='0.1.0',
    author='',
    author_email='',
    url='',
    description='shortest chains, school cliques and connectors in a friendship graph',
    long_description='',
    license='MIT',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=[
        'numpy',
        'pandas',
        'xopen>=0.5.0',
    ],
    extras_require={
        'tests': ['pytest'],
    },
    python_requires='>=3.7',
    entry_points={'console_scripts': ['friends = friends.__main__:main']},
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Education',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Mathematics',
    ]
)
