# pylint: disable=unused-import
from azgen.test.conftest import credentials, it_info
