GLOBAL_COMPETITORS = [
    # crm
    {"name": "HubSpot", "category": "crm", "aliases": ["hubspot", "hub spot", "hubspot crm", "marketing hub", "sales hub", "service hub"]},
    {"name": "Salesforce", "category": "crm", "aliases": ["salesforce", "sales force", "sfdc", "salesforce crm"]},
    {"name": "Zoho CRM", "category": "crm", "aliases": ["zoho", "zoho crm"]},
    {"name": "Pipedrive", "category": "crm", "aliases": ["pipedrive"]},
    {"name": "Freshworks", "category": "crm", "aliases": ["freshworks", "freshsales", "freshworks crm"]},
    # project management
    {"name": "Monday.com", "category": "project_management", "aliases": ["monday.com", "monday"]},
    {"name": "Asana", "category": "project_management", "aliases": ["asana"]},
    {"name": "Trello", "category": "project_management", "aliases": ["trello"]},
    {"name": "ClickUp", "category": "project_management", "aliases": ["clickup", "click up"]},
    {"name": "Notion", "category": "project_management", "aliases": ["notion"]},
    # email marketing
    {"name": "Mailchimp", "category": "email_marketing", "aliases": ["mailchimp", "mail chimp"]},
    {"name": "Constant Contact", "category": "email_marketing", "aliases": ["constant contact"]},
    {"name": "ActiveCampaign", "category": "email_marketing", "aliases": ["activecampaign", "active campaign"]},
    {"name": "ConvertKit", "category": "email_marketing", "aliases": ["convertkit", "kit"]},
    {"name": "Klaviyo", "category": "email_marketing", "aliases": ["klaviyo"]},
    {"name": "GetResponse", "category": "email_marketing", "aliases": ["getresponse"]},
    {"name": "AWeber", "category": "email_marketing", "aliases": ["aweber"]},
    {"name": "Campaign Monitor", "category": "email_marketing", "aliases": ["campaign monitor"]},
    # marketing automation
    {"name": "Marketo", "category": "marketing_automation", "aliases": ["marketo", "adobe marketo"]},
    {"name": "Pardot", "category": "marketing_automation", "aliases": ["pardot", "account engagement"]},
    {"name": "Eloqua", "category": "marketing_automation", "aliases": ["eloqua", "oracle eloqua"]},
    {"name": "SharpSpring", "category": "marketing_automation", "aliases": ["sharpspring"]},
    # seo and analytics
    {"name": "SEMrush", "category": "seo", "aliases": ["semrush"]},
    {"name": "Ahrefs", "category": "seo", "aliases": ["ahrefs"]},
    {"name": "Moz", "category": "seo", "aliases": ["moz", "moz pro"]},
    {"name": "Google Analytics", "category": "analytics", "aliases": ["google analytics", "ga4"]},
    {"name": "Adobe Analytics", "category": "analytics", "aliases": ["adobe analytics"]},
    {"name": "Mixpanel", "category": "analytics", "aliases": ["mixpanel"]},
    {"name": "Amplitude", "category": "analytics", "aliases": ["amplitude"]},
    # social media
    {"name": "Buffer", "category": "social_media", "aliases": ["buffer"]},
    {"name": "Hootsuite", "category": "social_media", "aliases": ["hootsuite"]},
    {"name": "Sprout Social", "category": "social_media", "aliases": ["sprout social", "sproutsocial"]},
    {"name": "Later", "category": "social_media", "aliases": ["later.com"]},
    {"name": "SocialBee", "category": "social_media", "aliases": ["socialbee"]},
    {"name": "CoSchedule", "category": "social_media", "aliases": ["coschedule"]},
    # content
    {"name": "BuzzSumo", "category": "content", "aliases": ["buzzsumo"]},
    {"name": "ContentCal", "category": "content", "aliases": ["contentcal"]},
    {"name": "Canva", "category": "design", "aliases": ["canva"]},
    {"name": "Figma", "category": "design", "aliases": ["figma"]},
    # automation
    {"name": "Zapier", "category": "automation", "aliases": ["zapier"]},
    {"name": "Make", "category": "automation", "aliases": ["make.com", "integromat"]},
    {"name": "IFTTT", "category": "automation", "aliases": ["ifttt"]},
    # optimization
    {"name": "Hotjar", "category": "optimization", "aliases": ["hotjar"]},
    {"name": "Crazy Egg", "category": "optimization", "aliases": ["crazy egg", "crazyegg"]},
    {"name": "Optimizely", "category": "optimization", "aliases": ["optimizely"]},
    {"name": "VWO", "category": "optimization", "aliases": ["vwo", "visual website optimizer"]},
    # communication and support
    {"name": "Slack", "category": "communication", "aliases": ["slack"]},
    {"name": "Microsoft Teams", "category": "communication", "aliases": ["microsoft teams", "ms teams"]},
    {"name": "Zoom", "category": "communication", "aliases": ["zoom"]},
    {"name": "Intercom", "category": "support", "aliases": ["intercom"]},
    {"name": "Zendesk", "category": "support", "aliases": ["zendesk"]},
    {"name": "LiveChat", "category": "support", "aliases": ["livechat", "live chat"]},
]

DEFAULT_GAZETTEER_CONFIDENCE = 0.9
