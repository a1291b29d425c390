import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pynewton",
    version="0.1.0",
    description="Newton-Raphson root finding with a full iteration trace.",
    include_package_data=True,
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest']
    },
    keywords='numerical root finding newton raphson',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['pynewton', 'pynewton.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
