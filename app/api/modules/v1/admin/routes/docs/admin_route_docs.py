# STATS ENDPOINT DOCS
stats_responses = {
    200: {
        "description": "Waitlist Statistics",
        "content": {
            "application/json": {
                "examples": {
                    "stats": {
                        "summary": "Dashboard Counters",
                        "value": {
                            "success": True,
                            "data": {
                                "total_entries": 120,
                                "completed_entries": 95,
                                "pending_entries": 25,
                                "verified_emails": 0,
                                "with_store_experience": 41,
                                "wants_tutorial_book": 60,
                                "countries": 9,
                            },
                        },
                    }
                }
            }
        },
    },
}

stats_custom_errors = ["401", "500"]
stats_custom_success = {"status_code": 200, "description": "Waitlist statistics retrieved."}

# EXPORT ENDPOINT DOCS
export_responses = {
    200: {
        "description": "CSV Attachment",
        "content": {
            "text/csv": {
                "example": "ID,Email,Full Name,Phone Number,Type of Business,...\n"
                "3f0b6c52-...,ada@example.com,Ada Obi,+234 801 234 5678,Retail,...\n"
            }
        },
    },
}

export_custom_errors = ["401", "500"]
export_custom_success = {"status_code": 200, "description": "Every entry as a CSV attachment."}
