# Diagnostics printed by the plist title lookup
MSG_FILE_DOES_NOT_EXIST = "Plist file does not exist."
MSG_NOT_A_PLIST = "Not a plist."
MSG_UNTITLED_PLIST = "No title in the plist."
MSG_UNEXPECTED_ERROR = "Utterly unexpected error."
