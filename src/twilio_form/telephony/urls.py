"""
Twilio REST API resource URLs.

Fetching a single resource is `<base>/<sid>.json`, where base comes from
get_sms_base() or get_call_base().
"""

REST_API_URL = "api.twilio.com/2010-04-01/Accounts"
REST_API_SMS_ENDPOINT = "Messages.json"
REST_API_CALL_ENDPOINT = "Calls.json"


def _accounts(account_sid: str, api_url: str) -> str:
    return f"https://{api_url}/{account_sid}"


def get_sms_base(account_sid: str, api_url: str = REST_API_URL) -> str:
    return f"{_accounts(account_sid, api_url)}/Messages"


def sms_resource_url(account_sid: str, api_url: str = REST_API_URL) -> str:
    """URL to post a message to, or to list messages from."""
    return f"{_accounts(account_sid, api_url)}/{REST_API_SMS_ENDPOINT}"


def sms_url(account_sid: str, sid: str, api_url: str = REST_API_URL) -> str:
    return f"{get_sms_base(account_sid, api_url)}/{sid}.json"


def get_call_base(account_sid: str, api_url: str = REST_API_URL) -> str:
    return f"{_accounts(account_sid, api_url)}/Calls"


def call_resource_url(account_sid: str, api_url: str = REST_API_URL) -> str:
    """URL to post a call to, or to list calls from."""
    return f"{_accounts(account_sid, api_url)}/{REST_API_CALL_ENDPOINT}"


def call_url(account_sid: str, sid: str, api_url: str = REST_API_URL) -> str:
    return f"{get_call_base(account_sid, api_url)}/{sid}.json"
