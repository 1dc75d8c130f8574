[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hwscan"
version = "0.1.0"
description = "Hardware and system information (CPU, memory, GPU, disks, batteries, network, main board, OS) read from procfs and sysfs on Linux"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["hardware", "system information", "sysfs", "procfs", "cpu", "memory", "gpu", "pci"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hwscan = "hwscan.report:main"

[tool.hatch.build.targets.wheel]
packages = ["hwscan"]

[tool.pytest.ini_options]
addopts = "-ra"
