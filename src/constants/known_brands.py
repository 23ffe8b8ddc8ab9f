TITLE_CASE_EXCEPTIONS = {
    "ios": "iOS",
    "iphone": "iPhone",
    "ipad": "iPad",
    "macos": "macOS",
    "linkedin": "LinkedIn",
    "youtube": "YouTube",
    "tiktok": "TikTok",
    "whatsapp": "WhatsApp",
    "hubspot": "HubSpot",
    "wordpress": "WordPress",
    "woocommerce": "WooCommerce",
    "bigcommerce": "BigCommerce",
    "onedrive": "OneDrive",
    "github": "GitHub",
    "gitlab": "GitLab",
    "clickup": "ClickUp",
    "invision": "InVision",
    "indesign": "InDesign",
    "paypal": "PayPal",
    "mailchimp": "Mailchimp",
    "activecampaign": "ActiveCampaign",
    "convertkit": "ConvertKit",
    "getresponse": "GetResponse",
    "semrush": "SEMrush",
    "sharpspring": "SharpSpring",
    "socialbee": "SocialBee",
    "coschedule": "CoSchedule",
    "buzzsumo": "BuzzSumo",
    "contentcal": "ContentCal",
    "livechat": "LiveChat",
    "aweber": "AWeber",
    "ifttt": "IFTTT",
    "vwo": "VWO",
    "crm": "CRM",
    "seo": "SEO",
    "ai": "AI",
}

SMALL_WORDS = {"a", "an", "and", "as", "at", "by", "for", "in", "of", "on", "or", "the", "to", "with"}

ALIAS_TABLE = {
    "hub spot": "HubSpot",
    "hubspot": "HubSpot",
    "sales force": "Salesforce",
    "salesforce": "Salesforce",
    "sfdc": "Salesforce",
    "monday": "Monday.com",
    "monday.com": "Monday.com",
    "ms teams": "Microsoft Teams",
    "microsoft teams": "Microsoft Teams",
    "mail chimp": "Mailchimp",
    "active campaign": "ActiveCampaign",
    "integromat": "Make",
    "g suite": "Google Workspace",
    "gsuite": "Google Workspace",
    "google workspace": "Google Workspace",
    "click up": "ClickUp",
    "zoho": "Zoho CRM",
    "freshworks crm": "Freshworks",
    "freshsales": "Freshworks",
    "semrush": "SEMrush",
    "sprout": "Sprout Social",
}
