from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from mediashelf.application.identity.use_cases.authentication_use_case import AuthenticationUseCase
from mediashelf.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from mediashelf.application.library.services.tag_resolver import TagResolver
from mediashelf.application.library.use_cases.book_management_use_case import BookManagementUseCase
from mediashelf.application.library.use_cases.media_library_management_use_case import (
    MediaLibraryManagementUseCase,
)
from mediashelf.application.library.use_cases.media_library_membership_use_case import (
    MediaLibraryMembershipUseCase,
)
from mediashelf.application.library.use_cases.media_library_query_use_case import (
    MediaLibraryQueryUseCase,
)
from mediashelf.config import get_settings
from mediashelf.domain.library.services.library_access_policy import LibraryAccessPolicy
from mediashelf.domain.library.services.library_name_generator import LibraryCopyNameGenerator
from mediashelf.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from mediashelf.infrastructure.identity.repositories.user_repository import UserRepository
from mediashelf.infrastructure.identity.services.password_service import PepperedPasswordHasher
from mediashelf.infrastructure.identity.services.token_service import JWTTokenService
from mediashelf.infrastructure.library.repositories import (
    BookRepository,
    MediaLibraryRepository,
    TagRepository,
)

settings = get_settings()


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    book_repository = providers.Factory(BookRepository, db=db)
    tag_repository = providers.Factory(TagRepository, db=db)
    media_library_repository = providers.Factory(MediaLibraryRepository, db=db)
    unit_of_work = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Identity repositories and services
    user_repository = providers.Factory(UserRepository, db=db)
    password_service = providers.Singleton(PepperedPasswordHasher.from_settings)
    token_service = providers.Singleton(JWTTokenService.from_settings)

    # Domain services (pure domain logic, no db)
    access_policy = providers.Singleton(LibraryAccessPolicy)
    name_generator = providers.Singleton(LibraryCopyNameGenerator)

    # Library module, application services and use cases
    tag_resolver = providers.Factory(TagResolver, tag_repository=tag_repository)

    book_management_use_case = providers.Factory(
        BookManagementUseCase,
        book_repository=book_repository,
        tag_resolver=tag_resolver,
        unit_of_work=unit_of_work,
    )

    media_library_query_use_case = providers.Factory(
        MediaLibraryQueryUseCase,
        library_repository=media_library_repository,
        book_repository=book_repository,
        access_policy=access_policy,
        default_page_size=settings.MEDIA_LIBRARY_DEFAULT_PAGE_SIZE,
        max_page_size=settings.MEDIA_LIBRARY_MAX_PAGE_SIZE,
    )

    media_library_management_use_case = providers.Factory(
        MediaLibraryManagementUseCase,
        library_repository=media_library_repository,
        tag_resolver=tag_resolver,
        access_policy=access_policy,
        name_generator=name_generator,
        unit_of_work=unit_of_work,
    )

    media_library_membership_use_case = providers.Factory(
        MediaLibraryMembershipUseCase,
        library_repository=media_library_repository,
        book_repository=book_repository,
        access_policy=access_policy,
        unit_of_work=unit_of_work,
    )

    # Identity use cases
    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )

    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        library_repository=media_library_repository,
        password_service=password_service,
        token_service=token_service,
        unit_of_work=unit_of_work,
    )


# Initialize container
container = Container()
