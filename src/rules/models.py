from pydantic import BaseModel, Field, model_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class InvoiceRules(BaseModel):
    route: str = "/dashboard/invoices"
    create_minor_unit_factor: int = Field(10, gt=0)
    update_minor_unit_factor: int = Field(100, gt=0)

    @model_validator(mode="after")
    def _route_is_internal(self) -> "InvoiceRules":
        if not self.route.startswith("/") or self.route.startswith("//"):
            raise ValueError(f"invoices.route must be an internal path, got {self.route!r}")
        return self


class SessionCookieRules(BaseModel):
    name: str = "access_token"
    secure: bool
    http_only: bool
    same_site: str


class SessionsRules(BaseModel):
    ttl_minutes: int
    cookie: SessionCookieRules


class AuthRules(BaseModel):
    provider: str = "credentials"
    password_min_length: int = 6
    sign_in_redirect: str = "/dashboard"
    sessions: SessionsRules


class OpsRules(BaseModel):
    data_dir_required: bool
    required_env: list[str]


class Rules(BaseModel):
    project: ProjectRules
    invoices: InvoiceRules
    auth: AuthRules
    ops: OpsRules
