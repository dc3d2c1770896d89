"""Package descriptor models and persistence."""

from .models import Copyright, FileCopyright, PackageDescriptor, Person
from .loader import create_descriptor_file, load_descriptor, template_descriptor, write_descriptor

__all__ = [
    "Copyright",
    "FileCopyright",
    "PackageDescriptor",
    "Person",
    "create_descriptor_file",
    "load_descriptor",
    "template_descriptor",
    "write_descriptor",
]
