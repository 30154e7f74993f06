import os

from Cython.Build import cythonize
from setuptools import Extension, find_packages, setup

# Pure Python unless explicitly asked to compile the permutation.
if os.environ.get("PICOKECCAK_CYTHON") == "1":
    cythonized_extensions = cythonize(
        [
            Extension(
                "picokeccak.permutation.keccak_f",
                ["src/picokeccak/permutation/keccak_f.py"],
                extra_compile_args=[
                    "-O3",
                    "-march=native",
                    "-Wno-unused-function",
                    "-Wno-unused-variable",
                ],
                language="c",
            ),
        ],
        compiler_directives={
            "language_level": 3,
            "boundscheck": False,
            "wraparound": False,
            "cdivision": True,
            "infer_types": True,
            "nonecheck": False,
            "initializedcheck": False,
            "annotation_typing": False,
        },
        build_dir=os.path.join("build", "cython"),
    )
else:
    cythonized_extensions = []

if __name__ == "__main__":
    setup(
        name="picokeccak",
        version="0.1.0",
        description="Picokeccak: Keccak-f[1600], SHA3, SHAKE and Keccak hashes",
        python_requires=">=3.9",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=[],
        extras_require={"test": ["pytest"]},
        ext_modules=cythonized_extensions,
    )
