from src.service.parking.app.interface.i_access_code_generator import IAccessCodeGenerator
from src.service.parking.app.interface.i_credential_manager import ICredentialManager
from src.service.parking.app.interface.i_parking_site_command_repo import IParkingSiteCommandRepo
from src.service.parking.app.interface.i_parking_site_query_repo import IParkingSiteQueryRepo
from src.service.parking.app.interface.i_schema_command_repo import ISchemaCommandRepo
from src.service.parking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.parking.app.interface.i_user_query_repo import IUserQueryRepo

__all__ = [
    'IAccessCodeGenerator',
    'ICredentialManager',
    'IParkingSiteCommandRepo',
    'IParkingSiteQueryRepo',
    'ISchemaCommandRepo',
    'IUserCommandRepo',
    'IUserQueryRepo',
]
