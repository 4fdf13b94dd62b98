"""Company Handlers — CRUD for companies.

Invariants:
    - create sets users and user_groups to []; no operation ever fills them
    - Deleting a company leaves users with that companyId untouched (no cascade)
"""

from typed_api.core.domain_types import Company, new_record_id
from typed_api.schemas.company import CompanyCreate
from typed_api.services.handle_records import RecordHandlers


class CompanyHandlers(RecordHandlers[Company]):
    resource_name = "Company"
    truthy_fields = ("name", "cnpj")

    def create(self, body: CompanyCreate) -> Company:
        company = Company(id=new_record_id(), name=body.name, cnpj=body.cnpj)
        return self._append(company)
