from setuptools import find_packages, setup

setup(
    name="httpreq",
    version="0.1.0",
    description="Immutable builders for HTTP request descriptors",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["httpreq", "httpreq.*"]),
    install_requires=[
        "cryptography >= 40.0.0",
        "http-message-signatures >= 0.5.0",
        "http-sfv",
        "typing_extensions >= 4.10",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
