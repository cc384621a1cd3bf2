[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simple_algorithms"
version = "0.1.0"
description = "Classic data-structure exercises: bracket matching, heaps, disjoint sets, hashing, tree traversals and an AVL tree with range sums."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "heap",
    "disjoint set",
    "hash table",
    "rabin-karp",
    "binary search tree",
    "avl tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sa-brackets = "simple_algorithms.brackets:main"
sa-tree-height = "simple_algorithms.tree_height:main"
sa-network-packets = "simple_algorithms.network_packets:main"
sa-max-stack = "simple_algorithms.max_stack:main"
sa-sliding-window = "simple_algorithms.sliding_window:main"
sa-heap-builder = "simple_algorithms.heap_builder:main"
sa-parallel-processing = "simple_algorithms.parallel_processing:main"
sa-table-merging = "simple_algorithms.table_merging:main"
sa-equality-check = "simple_algorithms.equality_check:main"
sa-phone-book = "simple_algorithms.phone_book:main"
sa-hash-chains = "simple_algorithms.hash_chains:main"
sa-rabin-karp = "simple_algorithms.rabin_karp:main"
sa-tree-traversal = "simple_algorithms.tree_traversal:main"
sa-bst-check = "simple_algorithms.bst_check:main"
sa-avl-sum-tree = "simple_algorithms.avl_sum_tree:main"

[tool.hatch.build.targets.wheel]
packages = ["simple_algorithms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
