# LOGIN ENDPOINT DOCS
login_responses = {
    200: {
        "description": "Login Successful",
        "content": {
            "application/json": {
                "examples": {
                    "success": {
                        "summary": "Administrator Authenticated",
                        "value": {
                            "success": True,
                            "data": {
                                "token": "<access_token>",
                                "token_type": "bearer",
                                "expires_in": 86400,
                            },
                        },
                    }
                }
            }
        },
    },
    401: {
        "description": "Unauthorized - Wrong Credentials",
        "content": {
            "application/json": {
                "examples": {
                    "invalid_credentials": {
                        "summary": "Wrong Username Or Password",
                        "value": {
                            "success": False,
                            "error": {
                                "code": "INVALID_CREDENTIALS",
                                "message": "Invalid username or password.",
                            },
                        },
                    },
                }
            }
        },
    },
    422: {
        "description": "Unprocessable Entity - Validation Failed",
        "content": {
            "application/json": {
                "examples": {
                    "validation_error": {
                        "summary": "Request Validation Failed",
                        "value": {
                            "success": False,
                            "error": {
                                "code": "VALIDATION_ERROR",
                                "message": "Invalid input.",
                                "details": {
                                    "username": ["Field required"],
                                    "password": ["Field required"],
                                },
                            },
                        },
                    },
                }
            }
        },
    },
    429: {
        "description": "Too Many Requests",
        "content": {
            "application/json": {
                "examples": {
                    "locked": {
                        "summary": "Too Many Attempts For This Username",
                        "value": {
                            "success": False,
                            "error": {
                                "code": "RATE_LIMIT_EXCEEDED",
                                "message": "Too many login attempts. Please try again later.",
                            },
                        },
                    }
                }
            }
        },
    },
}

login_custom_errors = ["401", "422", "429", "500"]
login_custom_success = {"status_code": 200, "description": "Login successful and token issued."}

# LOGOUT ENDPOINT DOCS
logout_responses = {
    200: {
        "description": "Logout Successful",
        "content": {
            "application/json": {
                "examples": {
                    "success": {
                        "summary": "Token Revoked",
                        "value": {"success": True, "data": None},
                    }
                }
            }
        },
    },
    401: {
        "description": "Unauthorized - Invalid Or Missing Token",
        "content": {
            "application/json": {
                "examples": {
                    "revoked": {
                        "summary": "Token Already Revoked",
                        "value": {
                            "success": False,
                            "error": {"code": "UNAUTHORIZED", "message": "Token has been revoked."},
                        },
                    }
                }
            }
        },
    },
}

logout_custom_errors = ["401", "500"]
logout_custom_success = {
    "status_code": 200,
    "description": "Administrator logged out and token denylisted.",
}
