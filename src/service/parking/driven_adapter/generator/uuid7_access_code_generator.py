from uuid_utils import uuid7

from src.service.parking.app.interface.i_access_code_generator import IAccessCodeGenerator


class Uuid7AccessCodeGenerator(IAccessCodeGenerator):
    """Codes look like 'stirling+ONE+01936d8f-5e73-7c4e-a9c5-123456789abc'"""

    def generate(self, *, location: str, site: str) -> str:
        return f'{location}+{site}+{uuid7()}'
