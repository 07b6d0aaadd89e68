from mediashelf.domain.library.services.library_access_policy import LibraryAccessPolicy
from mediashelf.domain.library.services.library_name_generator import LibraryCopyNameGenerator

__all__ = ["LibraryAccessPolicy", "LibraryCopyNameGenerator"]
