"""Repository entity models."""

from pydantic import BaseModel, Field, validator


class SourceRepository(BaseModel):
    """GitHub repository as returned by the public listing API."""

    name: str = Field(..., description='Repository name')
    url: str = Field(..., alias='html_url', description='Clone address')
    description: str = Field(default='', description='Repository description')
    is_fork: bool = Field(default=False, alias='fork', description='Is a fork')

    @validator('description', pre=True)
    def empty_description(cls, v):
        """GitHub sends null for repositories without a description."""
        return v or ''

    class Config:
        """Pydantic configuration."""

        frozen = True


class DestinationRepository(BaseModel):
    """Gogs repository owned by the authenticated user."""

    name: str = Field(..., description='Repository name')
    description: str = Field(default='', description='Repository description')
    is_mirror: bool = Field(default=False, alias='mirror', description='Is a mirror')

    @validator('description', pre=True)
    def empty_description(cls, v):
        """Treat a null description as empty."""
        return v or ''

    class Config:
        """Pydantic configuration."""

        frozen = True


class MigrateRequest(BaseModel):
    """Body of a Gogs ``POST /repos/migrate`` request."""

    clone_addr: str = Field(..., description='Address to clone from')
    description: str = Field(default='', description='Repository description')
    mirror: bool = Field(default=True, description='Create as a mirror')
    repo_name: str = Field(..., description='Destination repository name')
    uid: int = Field(..., description='Owner user ID')

    @classmethod
    def from_source(cls, repo: SourceRepository, uid: int) -> 'MigrateRequest':
        """Build a mirror migration request for a source repository."""
        return cls(
            clone_addr=repo.url,
            description=repo.description,
            repo_name=repo.name,
            uid=uid,
        )
