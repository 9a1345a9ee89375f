from pydantic import BaseModel, Field, field_validator


class ScopeModel(BaseModel):
    name: str = Field(..., description="Section title rendered as '### <name>'")
    labels: list[str] = Field(default_factory=list, description="Merge request labels that select this scope")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("scope name cannot be empty")
        return v


class ScopeConfigModel(BaseModel):
    """Groups changelog entries into '### <scope>' sections by merge request labels."""

    scopes: list[ScopeModel] = Field(default_factory=list)
    default_scope: str = Field(default="Other changes", description="Scope for entries matching no labels")
    author_labels: list[str] = Field(
        default_factory=list, description="Entries carrying any of these labels are credited to their author"
    )

    def scope_for(self, labels: tuple[str, ...] | list[str]) -> str:
        """First scope sharing a label with the merge request, else the default scope."""
        for scope in self.scopes:
            if set(scope.labels) & set(labels):
                return scope.name
        return self.default_scope

    def credits_author(self, labels: tuple[str, ...] | list[str]) -> bool:
        return bool(set(self.author_labels) & set(labels))

    def scope_order(self) -> list[str]:
        names = [scope.name for scope in self.scopes]
        if self.default_scope not in names:
            names.append(self.default_scope)
        return names
