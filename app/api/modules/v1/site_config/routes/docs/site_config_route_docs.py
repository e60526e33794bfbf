_CONTENT_EXAMPLE = {
    "id": "a1d4c7e2-5b0f-4f7e-8a63-0c3b9e2f1d44",
    "key": "heroTitle",
    "value": "E-commerce meets music",
    "type": "text",
    "category": "hero",
    "description": "Main headline on the email capture page",
    "is_active": True,
    "updated_by": None,
    "created_at": "2025-06-30T08:25:37Z",
    "updated_at": "2025-06-30T08:25:37Z",
}

_SETTING_EXAMPLE = {
    "id": "9b8f1a3c-2d6e-4c1b-b0a7-5e4f3d2c1b0a",
    "key": "waitlistEnabled",
    "value": "true",
    "type": "boolean",
    "category": "waitlist",
    "description": None,
    "is_sensitive": False,
    "updated_by": None,
    "created_at": "2025-06-30T08:26:44Z",
    "updated_at": "2025-06-30T08:26:44Z",
}

# PUBLIC CONTENT ENDPOINT DOCS
list_content_responses = {
    200: {
        "description": "Active Content",
        "content": {
            "application/json": {
                "examples": {
                    "content": {
                        "summary": "Active Content Rows",
                        "value": {"success": True, "data": [_CONTENT_EXAMPLE]},
                    }
                }
            }
        },
    },
}

list_content_custom_errors = ["500"]
list_content_custom_success = {"status_code": 200, "description": "Active site content."}

# CREATE CONTENT ENDPOINT DOCS
create_content_responses = {
    201: {
        "description": "Content Created",
        "content": {
            "application/json": {
                "examples": {
                    "created": {
                        "summary": "New Content Row",
                        "value": {"success": True, "data": _CONTENT_EXAMPLE},
                    }
                }
            }
        },
    },
    422: {
        "description": "Unprocessable Entity - Validation Failed",
        "content": {
            "application/json": {
                "examples": {
                    "duplicate_key": {
                        "summary": "Key Already Used",
                        "value": {
                            "success": False,
                            "error": {
                                "code": "VALIDATION_ERROR",
                                "message": "Invalid input.",
                                "details": {"key": ["The key has already been taken."]},
                            },
                        },
                    }
                }
            }
        },
    },
}

create_content_custom_errors = ["401", "422", "500"]
create_content_custom_success = {"status_code": 201, "description": "Content row created."}

update_content_custom_errors = ["401", "404", "422", "500"]
update_content_custom_success = {"status_code": 200, "description": "Content row updated."}

# PUBLIC SETTINGS ENDPOINT DOCS
list_settings_responses = {
    200: {
        "description": "Public Settings",
        "content": {
            "application/json": {
                "examples": {
                    "settings": {
                        "summary": "Non-sensitive Settings Rows",
                        "value": {"success": True, "data": [_SETTING_EXAMPLE]},
                    }
                }
            }
        },
    },
}

list_settings_custom_errors = ["500"]
list_settings_custom_success = {"status_code": 200, "description": "Non-sensitive settings."}

site_config_custom_errors = ["500"]
site_config_custom_success = {
    "status_code": 200,
    "description": "Typed site configuration with defaults applied.",
}

# UPDATE SETTINGS ENDPOINT DOCS
update_settings_responses = {
    200: {
        "description": "Settings Updated",
        "content": {
            "application/json": {
                "examples": {
                    "updated": {
                        "summary": "Changed Rows",
                        "value": {"success": True, "data": [_SETTING_EXAMPLE]},
                    }
                }
            }
        },
    },
    422: {
        "description": "Unprocessable Entity - Validation Failed",
        "content": {
            "application/json": {
                "examples": {
                    "unknown_key": {
                        "summary": "Key Does Not Exist, Nothing Written",
                        "value": {
                            "success": False,
                            "error": {
                                "code": "VALIDATION_ERROR",
                                "message": "Invalid input.",
                                "details": {
                                    "settings.0.key": ["The selected settings.0.key is invalid."]
                                },
                            },
                        },
                    },
                    "bad_value": {
                        "summary": "Value Does Not Match Row Type",
                        "value": {
                            "success": False,
                            "error": {
                                "code": "VALIDATION_ERROR",
                                "message": "Invalid input.",
                                "details": {"settings.0.value": ["The value must be true or false."]},
                            },
                        },
                    },
                }
            }
        },
    },
}

update_settings_custom_errors = ["401", "422", "500"]
update_settings_custom_success = {"status_code": 200, "description": "Settings updated."}

admin_list_custom_errors = ["401", "500"]
admin_list_custom_success = {"status_code": 200, "description": "All rows, sensitive included."}
