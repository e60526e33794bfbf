_ENTRY_EXAMPLE = {
    "id": "3f0b6c52-8a7e-4b8e-9a55-6f2b1c0d9e11",
    "email": "ada@example.com",
    "full_name": None,
    "phone_number": None,
    "type_of_business": None,
    "custom_business_types": None,
    "country": None,
    "custom_country": None,
    "city": None,
    "has_run_store_before": False,
    "wants_tutorial_book": False,
    "ip_address": "203.0.113.7",
    "user_agent": "Mozilla/5.0",
    "referrer": "https://example.com/launch",
    "utm_source": "newsletter",
    "utm_medium": "email",
    "utm_campaign": "launch",
    "status": "pending",
    "email_verified": False,
    "email_verification_sent_at": None,
    "created_at": "2025-06-30T08:23:53Z",
    "updated_at": "2025-06-30T08:23:53Z",
}

_COMPLETED_EXAMPLE = {
    **_ENTRY_EXAMPLE,
    "full_name": "Ada Obi",
    "phone_number": "+234 801 234 5678",
    "type_of_business": "Retail",
    "country": "Nigeria",
    "city": "Lagos",
    "has_run_store_before": True,
    "status": "completed",
    "updated_at": "2025-06-30T08:25:10Z",
}

_NOT_FOUND = {
    "description": "Entry Not Found",
    "content": {
        "application/json": {
            "examples": {
                "not_found": {
                    "summary": "Unknown Entry",
                    "value": {
                        "success": False,
                        "error": {"code": "NOT_FOUND", "message": "Waitlist entry not found."},
                    },
                }
            }
        }
    },
}

_UNAUTHORIZED = {
    "description": "Unauthorized - Missing or Invalid Token",
    "content": {
        "application/json": {
            "examples": {
                "missing_token": {
                    "summary": "No Bearer Token",
                    "value": {
                        "success": False,
                        "error": {"code": "UNAUTHORIZED", "message": "Authentication required."},
                    },
                }
            }
        }
    },
}

# EMAIL CAPTURE ENDPOINT DOCS
capture_email_responses = {
    201: {
        "description": "Email Captured",
        "content": {
            "application/json": {
                "examples": {
                    "created": {
                        "summary": "New Pending Entry",
                        "value": {"success": True, "data": _ENTRY_EXAMPLE},
                    }
                }
            }
        },
    },
    200: {
        "description": "Pending Entry Resumed",
        "content": {
            "application/json": {
                "examples": {
                    "resumed": {
                        "summary": "Existing Pending Entry Returned Unchanged",
                        "value": {"success": True, "data": _ENTRY_EXAMPLE},
                    }
                }
            }
        },
    },
    409: {
        "description": "Conflict - Email Already Used",
        "content": {
            "application/json": {
                "examples": {
                    "email_used": {
                        "summary": "Email Belongs To A Completed Entry",
                        "value": {
                            "success": False,
                            "error": {
                                "code": "EMAIL_USED",
                                "message": "This email is already used by someone. "
                                "Please try another email.",
                            },
                        },
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
                    "invalid_email": {
                        "summary": "Invalid Email Format",
                        "value": {
                            "success": False,
                            "error": {
                                "code": "VALIDATION_ERROR",
                                "message": "Invalid input.",
                                "details": {
                                    "email": [
                                        "value is not a valid email address: "
                                        "An email address must have an @-sign."
                                    ]
                                },
                            },
                        },
                    }
                }
            }
        },
    },
    429: {
        "description": "Too Many Requests",
        "content": {
            "application/json": {
                "examples": {
                    "throttled": {
                        "summary": "Capture Rate Limit Reached",
                        "value": {
                            "success": False,
                            "error": {
                                "code": "RATE_LIMIT_EXCEEDED",
                                "message": "Too many requests. Please try again later.",
                            },
                        },
                    }
                }
            }
        },
    },
}

capture_email_custom_errors = ["409", "422", "429", "500"]
capture_email_custom_success = {
    "status_code": 201,
    "description": "Email reserved; an existing pending entry is returned with 200.",
}

# UPDATE DETAILS ENDPOINT DOCS
update_details_responses = {
    200: {
        "description": "Entry Completed",
        "content": {
            "application/json": {
                "examples": {
                    "completed": {
                        "summary": "Details Saved",
                        "value": {"success": True, "data": _COMPLETED_EXAMPLE},
                    }
                }
            }
        },
    },
    404: _NOT_FOUND,
    422: {
        "description": "Unprocessable Entity - Validation Failed",
        "content": {
            "application/json": {
                "examples": {
                    "other_business": {
                        "summary": "Business Type 'Other' Without Description",
                        "value": {
                            "success": False,
                            "error": {
                                "code": "VALIDATION_ERROR",
                                "message": "Invalid input.",
                                "details": {
                                    "customBusinessTypes": ["Please specify your business type"]
                                },
                            },
                        },
                    },
                    "bad_phone": {
                        "summary": "Invalid Phone Number",
                        "value": {
                            "success": False,
                            "error": {
                                "code": "VALIDATION_ERROR",
                                "message": "Invalid input.",
                                "details": {"phoneNumber": ["Please enter a valid phone number"]},
                            },
                        },
                    },
                }
            }
        },
    },
}

update_details_custom_errors = ["404", "422", "500"]
update_details_custom_success = {
    "status_code": 200,
    "description": "Details merged and entry marked completed.",
}

# LIST ENTRIES ENDPOINT DOCS
list_entries_responses = {
    200: {
        "description": "Entries Retrieved",
        "content": {
            "application/json": {
                "examples": {
                    "entries": {
                        "summary": "All Entries, Oldest First",
                        "value": {"success": True, "data": [_COMPLETED_EXAMPLE]},
                    }
                }
            }
        },
    },
    401: _UNAUTHORIZED,
}

list_entries_custom_errors = ["401", "422", "500"]
list_entries_custom_success = {"status_code": 200, "description": "Waitlist entries retrieved."}

# GET ENTRY ENDPOINT DOCS
get_entry_responses = {
    200: {
        "description": "Entry Retrieved",
        "content": {
            "application/json": {
                "examples": {
                    "entry": {
                        "summary": "Single Entry",
                        "value": {"success": True, "data": _COMPLETED_EXAMPLE},
                    }
                }
            }
        },
    },
    401: _UNAUTHORIZED,
    404: _NOT_FOUND,
}

get_entry_custom_errors = ["401", "404", "500"]
get_entry_custom_success = {"status_code": 200, "description": "Waitlist entry retrieved."}

# DELETE ENTRY ENDPOINT DOCS
delete_entry_responses = {
    200: {
        "description": "Entry Deleted",
        "content": {
            "application/json": {
                "examples": {
                    "deleted": {
                        "summary": "Entry Removed",
                        "value": {
                            "success": True,
                            "data": {"id": "3f0b6c52-8a7e-4b8e-9a55-6f2b1c0d9e11"},
                        },
                    }
                }
            }
        },
    },
    401: _UNAUTHORIZED,
    404: _NOT_FOUND,
}

delete_entry_custom_errors = ["401", "404", "500"]
delete_entry_custom_success = {"status_code": 200, "description": "Waitlist entry deleted."}

# BULK DELETE ENDPOINT DOCS
bulk_delete_responses = {
    200: {
        "description": "Entries Deleted",
        "content": {
            "application/json": {
                "examples": {
                    "deleted": {
                        "summary": "All Requested Entries Removed",
                        "value": {"success": True, "data": {"deleted": 2}},
                    }
                }
            }
        },
    },
    401: _UNAUTHORIZED,
    422: {
        "description": "Unprocessable Entity - Unknown Ids",
        "content": {
            "application/json": {
                "examples": {
                    "unknown_id": {
                        "summary": "One Id Does Not Exist, Nothing Deleted",
                        "value": {
                            "success": False,
                            "error": {
                                "code": "VALIDATION_ERROR",
                                "message": "Invalid input.",
                                "details": {"ids": ["The selected id 42 is invalid."]},
                            },
                        },
                    }
                }
            }
        },
    },
}

bulk_delete_custom_errors = ["401", "422", "500"]
bulk_delete_custom_success = {
    "status_code": 200,
    "description": "Every requested entry deleted, or none.",
}
