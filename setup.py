from setuptools import setup

setup(
    name='prsregion',
    version='0.1.0',
    description='Named genomic region sets for annotating SNP positions',
    install_requires=['pandas', 'numpy'],
    extras_require={'test': ['pytest']},
    packages=['prsregion'],
    python_requires='>=3.10',
    zip_safe=False
)
