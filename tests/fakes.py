# Fake commands output.

APT_GET_LOG_WRAPPER = """
log_path=$(dirname "$0")/../
echo -- "$@" >> "${log_path}/apt_get.args"
env >> "${log_path}/apt_get.env"
"""

APT_HELPER_LOG_WRAPPER = """
log_path=$(dirname "$0")/../
echo -- "$@" >> "${log_path}/apt_helper.args"
"""

APT_HELPER_UNAUTHORIZED = """
echo "E: Failed to fetch https://esm.ubuntu.com/  401  Unauthorized \
[IP: 1.2.3.4]"
exit 1
"""

APT_HELPER_UNAUTHORIZED_TRUSTY = """
echo "E: Failed to fetch https://esm.ubuntu.com/  HttpError401"
exit 1
"""

APT_HELPER_NOT_FOUND = """
echo "E: Failed to fetch https://esm.ubuntu.com/  404  Not Found \
[IP: 1.2.3.4]"
exit 1
"""
