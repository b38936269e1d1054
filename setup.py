from pathlib import Path
from typing import Dict

from setuptools import setup

meta: Dict[str, str] = {}
exec(Path('asscue/_metadata.py').read_text(), meta)

with open('requirements.txt', encoding='utf-8') as fh:
    reqs = fh.readlines()

with open('requirements-dev.txt', encoding='utf-8') as fh:
    reqs_dev = fh.readlines()

with open('README.md', encoding='utf-8') as fh:
    long_description = fh.read()

setup(
    name='asscue',
    author=meta['__author__'],
    description='Parse ASS (Advanced SubStation Alpha) subtitles and resolve each cue into a renderer-neutral style.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    version=meta['__version__'],
    packages=['asscue'],
    package_data={
        'asscue': ['py.typed'],
    },
    python_requires='>=3.8',
    install_requires=reqs,
    extras_require={'dev': reqs_dev, 'test': reqs_dev},
    keywords='ass subtitle advanced-substation-alpha parser style player',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Topic :: Multimedia :: Video',
        'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',
    ],
    license='GNU LGPL 3.0 or later',
)
