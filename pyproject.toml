[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fearless"
version = "0.1.0"
description = "Concurrency building blocks and worked examples: naive hash maps, a ring buffer, a shared queue and stack, a semaphore, a spinning mutex and a UDP telemetry pipeline."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "threads",
    "hashmap",
    "queue",
    "semaphore",
    "mutex",
    "stack",
    "telemetry",
    "quantiles",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
fearless-hello = "fearless.hello:main"
fearless-missions = "fearless.missions:main"
fearless-bench = "fearless.bench:main"
fearless-interpreter = "fearless.interpreter:main"
fearless-ring = "fearless.ring:main"
fearless-bridge = "fearless.bridge:main"
fearless-locks = "fearless.locks:main"
fearless-rocket = "fearless.rocket:main"
fearless-mpmc = "fearless.mpmc:main"
fearless-demos = "fearless.synchro.demos:main"
fearless-stack-bench = "fearless.stack_bench:main"
fearless-telem = "fearless.telem.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fearless"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
