import setuptools

import hline.version

with open("README.md", "r") as readme:
    long_description = readme.read()

setuptools.setup(
    name='hline',
    version=hline.version.VERSION,
    description='Haskell one-liners for shell pipelines',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages('.', include=['hline', 'hline.*']),
    scripts=['bin/hline'],
    extras_require={
        'test': ['dill', 'pytest'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: POSIX :: Linux'
    ],
    python_requires='>=3.8'
)
