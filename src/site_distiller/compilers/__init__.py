from .compiler import Compiler
from .favicons import FaviconGenerator
from .site_compiler import SiteCompiler

__all__ = ["Compiler", "FaviconGenerator", "SiteCompiler"]
