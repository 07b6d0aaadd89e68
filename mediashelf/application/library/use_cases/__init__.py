from mediashelf.application.library.use_cases.book_management_use_case import (
    BookCreateData,
    BookManagementUseCase,
)
from mediashelf.application.library.use_cases.media_library_management_use_case import (
    CopiedMediaLibrary,
    MediaLibraryCreateData,
    MediaLibraryManagementUseCase,
    MediaLibraryUpdateData,
)
from mediashelf.application.library.use_cases.media_library_membership_use_case import (
    MediaLibraryMembershipUseCase,
)
from mediashelf.application.library.use_cases.media_library_query_use_case import (
    MediaLibraryDetail,
    MediaLibraryQueryUseCase,
    MediaLibrarySummary,
)

__all__ = [
    "BookCreateData",
    "BookManagementUseCase",
    "CopiedMediaLibrary",
    "MediaLibraryCreateData",
    "MediaLibraryDetail",
    "MediaLibraryManagementUseCase",
    "MediaLibraryMembershipUseCase",
    "MediaLibraryQueryUseCase",
    "MediaLibrarySummary",
    "MediaLibraryUpdateData",
]
