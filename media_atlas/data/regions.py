"""Reference coordinates for countries, states and cities."""

from __future__ import annotations

# ISO 3166-1 alpha-2 code -> known display names (English first).
COUNTRY_NAMES: dict[str, tuple[str, ...]] = {
    # Asia
    "JP": ("Japan", "日本"),
    "KR": ("South Korea", "Republic of Korea", "韓国", "Korea"),
    "CN": ("China", "中華人民共和国", "中国"),
    "IN": ("India", "インド"),
    "ID": ("Indonesia", "インドネシア"),
    "TH": ("Thailand", "タイ"),
    "PH": ("Philippines", "フィリピン"),
    "VN": ("Vietnam", "ベトナム"),
    "SG": ("Singapore", "シンガポール"),
    "MY": ("Malaysia", "マレーシア"),
    "HK": ("Hong Kong", "香港"),
    "TW": ("Taiwan", "台湾", "Republic of China"),
    # North America
    "US": ("United States", "USA", "United States of America", "米国", "アメリカ"),
    "CA": ("Canada", "カナダ"),
    "MX": ("Mexico", "メキシコ"),
    # Europe
    "FR": ("France", "フランス"),
    "DE": ("Germany", "ドイツ"),
    "GB": ("United Kingdom", "UK", "イギリス", "英国"),
    "IT": ("Italy", "イタリア"),
    "ES": ("Spain", "スペイン"),
    "RU": ("Russia", "Russian Federation", "ロシア"),
    "NL": ("Netherlands", "オランダ"),
    "BE": ("Belgium", "ベルギー"),
    "SE": ("Sweden", "スウェーデン"),
    "NO": ("Norway", "ノルウェー"),
    "DK": ("Denmark", "デンマーク"),
    "FI": ("Finland", "フィンランド"),
    "CH": ("Switzerland", "スイス"),
    "AT": ("Austria", "オーストリア"),
    "PT": ("Portugal", "ポルトガル"),
    "IE": ("Ireland", "アイルランド"),
    "GR": ("Greece", "ギリシャ"),
    "PL": ("Poland", "ポーランド"),
    "CZ": ("Czech Republic", "チェコ"),
    "HU": ("Hungary", "ハンガリー"),
    # South America
    "BR": ("Brazil", "ブラジル"),
    "AR": ("Argentina", "アルゼンチン"),
    "CL": ("Chile", "チリ"),
    "CO": ("Colombia", "コロンビア"),
    "PE": ("Peru", "ペルー"),
    # Oceania
    "AU": ("Australia", "オーストラリア"),
    "NZ": ("New Zealand", "ニュージーランド"),
    # Africa
    "ZA": ("South Africa", "南アフリカ"),
    "EG": ("Egypt", "エジプト"),
    "NG": ("Nigeria", "ナイジェリア"),
    # Middle East
    "SA": ("Saudi Arabia", "サウジアラビア"),
    "AE": ("United Arab Emirates", "UAE", "アラブ首長国連邦"),
    "TR": ("Turkey", "トルコ"),
}

COUNTRY_CENTERS: dict[str, tuple[float, float]] = {
    "JP": (36.2048, 138.2529),
    "KR": (37.0, 127.5),
    "CN": (35.0, 105.0),
    "IN": (20.5937, 78.9629),
    "ID": (-0.7893, 113.9213),
    "TH": (15.87, 100.9925),
    "PH": (12.8797, 121.774),
    "VN": (21.0279, 105.851),
    "SG": (1.3667, 103.8),
    "MY": (2.5, 112.5),
    "HK": (22.3, 114.1),
    "TW": (23.5, 121.0),
    "US": (37.0902, -95.7129),
    "CA": (56.1304, -106.3468),
    "MX": (23.6345, -102.5528),
    "FR": (46.0, 2.0),
    "DE": (51.0, 9.0),
    "GB": (55.3781, -3.436),
    "IT": (41.8719, 12.5674),
    "ES": (40.4637, -3.7492),
    "RU": (61.524, 105.3188),
    "NL": (52.1326, 5.2913),
    "BE": (50.5039, 4.4699),
    "SE": (60.1282, 18.6435),
    "NO": (60.472, 8.4689),
    "DK": (56.2639, 9.5018),
    "FI": (61.9241, 25.7482),
    "CH": (46.8182, 8.2275),
    "AT": (47.5162, 14.5501),
    "PT": (39.3999, -8.2245),
    "IE": (53.4129, -8.2439),
    "GR": (39.0742, 21.8243),
    "PL": (51.9194, 19.1451),
    "CZ": (49.8175, 15.473),
    "HU": (47.1625, 19.5033),
    "BR": (-14.235, -51.9253),
    "AR": (-34.8, -64.965),
    "CL": (-35.6751, -71.5429),
    "CO": (4.5709, -74.2973),
    "PE": (-9.19, -75.0152),
    "AU": (-25.0, 135.0),
    "NZ": (-42.0, 174.0),
    "ZA": (-30.5595, 22.9375),
    "EG": (26.8206, 30.8025),
    "NG": (9.082, 8.6753),
    "SA": (23.8859, 45.0792),
    "AE": (23.4241, 53.8478),
    "TR": (38.9637, 35.2433),
}

# Country display name -> state name -> (lat, lng).
STATE_CENTERS: dict[str, dict[str, tuple[float, float]]] = {
    "Australia": {
        "New South Wales": (-32.0, 147.0),
        "Victoria": (-37.0, 144.0),
        "Queensland": (-23.0, 143.0),
        "Western Australia": (-25.0, 121.0),
        "South Australia": (-30.0, 134.0),
    },
    "China": {
        "Guangdong": (23.379, 113.7633),
        "Jiangsu": (32.9711, 119.4554),
        "Shandong": (36.6681, 118.0019),
        "Zhejiang": (29.1832, 120.0934),
        "Henan": (33.8821, 113.614),
        "Sichuan": (30.6595, 104.0657),
        "Hubei": (30.9756, 112.2707),
        "Fujian": (26.0789, 119.3062),
        "Hunan": (27.6104, 113.0823),
        "Anhui": (32.8822, 117.2827),
        "Hebei": (38.0428, 114.5149),
        "Shaanxi": (34.3431, 108.9402),
        "Jiangxi": (27.614, 115.7221),
        "Liaoning": (41.8057, 123.4291),
        "Yunnan": (24.8801, 102.8329),
        "Shanxi": (37.8734, 112.562),
        "Guizhou": (26.8154, 106.8748),
        "Heilongjiang": (47.9219, 126.6425),
        "Jilin": (43.6664, 126.1922),
        "Gansu": (35.5692, 104.9903),
        "Hainan": (20.0174, 110.3491),
        "Qinghai": (35.7452, 95.9956),
        "Guanxi": (23.8298, 108.3319),
        "Inner Mongolia": (43.535, 115.7321),
        "Ningxia": (38.4723, 106.2782),
        "Xinjiang": (41.0934, 85.24),
        "Tibet": (30.5081, 91.1403),
        "Shanghai": (31.2304, 121.4737),
        "Chongqing": (29.563, 106.5516),
        "Beijing": (39.9042, 116.4074),
        "Tianjin": (39.3434, 117.3616),
        "Hong Kong": (22.3964, 114.1095),
        "Macau": (22.1987, 113.5439),
    },
    "Japan": {
        "Hokkaido": (43.0642, 141.3468),
        "Aomori": (40.8246, 140.74),
        "Iwate": (39.7036, 141.1527),
        "Miyagi": (38.2688, 140.8721),
        "Akita": (39.7186, 140.1024),
        "Yamagata": (38.2404, 140.3633),
        "Fukushima": (37.7503, 140.4677),
        "Ibaraki": (36.3418, 140.4468),
        "Tochigi": (36.5658, 139.8836),
        "Gunma": (36.3911, 139.0608),
        "Saitama": (35.8569, 139.6489),
        "Chiba": (35.6046, 140.1233),
        "Tokyo": (35.6895, 139.6917),
        "Kanagawa": (35.4475, 139.6423),
        "Niigata": (37.9022, 139.0236),
        "Toyama": (36.6953, 137.2114),
        "Ishikawa": (36.5946, 136.6256),
        "Fukui": (36.0652, 136.2216),
        "Yamanashi": (35.6641, 138.5683),
        "Nagano": (36.6513, 138.1809),
        "Gifu": (35.3912, 136.7222),
        "Shizuoka": (34.9769, 138.383),
        "Aichi": (35.1802, 136.9064),
        "Mie": (34.7303, 136.5086),
        "Shiga": (35.0045, 135.8686),
        "Kyoto": (35.0212, 135.7556),
        "Osaka": (34.6937, 135.5023),
        "Hyogo": (34.6913, 135.183),
        "Nara": (34.6851, 135.8327),
        "Wakayama": (34.226, 135.1675),
        "Tottori": (35.5033, 134.2382),
        "Shimane": (35.4723, 133.0505),
        "Okayama": (34.6618, 133.9344),
        "Hiroshima": (34.3966, 132.4596),
        "Yamaguchi": (34.1861, 131.4705),
        "Tokushima": (34.0658, 134.5593),
        "Kagawa": (34.3401, 134.0434),
        "Ehime": (33.8416, 132.7657),
        "Kochi": (33.5597, 133.5311),
        "Fukuoka": (33.6066, 130.4183),
        "Saga": (33.2494, 130.2988),
        "Nagasaki": (32.7503, 129.8777),
        "Kumamoto": (32.8031, 130.7079),
        "Oita": (33.2382, 131.612),
        "Miyazaki": (31.9111, 131.4239),
        "Kagoshima": (31.5602, 130.558),
        "Okinawa": (26.2124, 127.6809),
    },
    "Taiwan": {
        "New Taipei": (25.0169, 121.4628),
        "Taipei": (25.033, 121.5654),
        "Kaohsiung": (22.6273, 120.3014),
        "Taichung": (24.1477, 120.6736),
        "Tainan": (22.9999, 120.227),
        "Keelung": (25.1302, 121.7415),
        "Hsinchu": (24.8138, 120.9685),
        "Taoyuan": (24.9932, 121.2969),
        "Changhua": (24.0904, 120.5375),
        "Yunlin": (23.7104, 120.4223),
        "Pingtung County": (22.6722, 120.4875),
    },
    "New Zealand": {
        "Auckland": (-36.8485, 174.7633),
        "Wellington": (-41.2865, 174.7762),
        "Christchurch": (-43.5321, 172.6362),
        "Canterbury": (-43.5321, 172.6362),
        "Hamilton": (-37.787, 175.2793),
        "Tauranga": (-37.6861, 176.1651),
        "Dunedin": (-45.8788, 170.5028),
        "Otago": (-45.8788, 170.5028),
        "Central Otago District": (-45.8788, 170.5028),
        "PalmerstonNorth": (-40.3523, 175.608),
        "Napier": (-39.4928, 176.9126),
        "Hastings": (-39.6422, 176.8439),
        "Queenstown-Lakes District": (-45.0311, 168.6626),
    },
    "South Korea": {
        "Seoul": (37.5665, 126.978),
        "Busan": (35.1796, 129.0756),
        "Incheon": (37.4563, 126.7052),
        "Daegu": (35.8714, 128.6014),
        "Daejeon": (36.3504, 127.3845),
        "Gwangju": (35.1595, 126.8526),
        "Ulsan": (35.5384, 129.3114),
        "Sejong": (36.4802, 127.2897),
    },
    "United States": {
        "Alabama": (32.8065, -86.7911),
        "Alaska": (61.3707, -152.4044),
        "Arizona": (33.7298, -111.4312),
        "Arkansas": (34.7465, -92.2896),
        "California": (36.7783, -119.4179),
        "Colorado": (39.5501, -105.7821),
        "Connecticut": (41.6032, -73.0877),
        "Delaware": (38.9108, -75.5277),
        "Florida": (27.9944, -81.7603),
        "Georgia": (32.1656, -82.9001),
        "Hawaii": (19.8968, -155.5828),
        "Idaho": (44.0682, -114.742),
        "Illinois": (40.6331, -89.3985),
        "Indiana": (39.7684, -86.1581),
        "Iowa": (41.878, -93.0977),
        "Kansas": (38.5266, -96.7265),
        "Kentucky": (37.8393, -84.27),
        "Louisiana": (30.9843, -91.9623),
        "Maine": (45.2538, -69.4455),
        "Maryland": (39.0458, -76.6413),
        "Massachusetts": (42.4072, -71.3824),
        "Michigan": (44.3148, -85.6024),
        "Minnesota": (46.7296, -94.6859),
        "Mississippi": (32.7416, -89.6787),
        "Missouri": (37.9643, -91.8318),
        "Montana": (46.8797, -110.3626),
        "Nebraska": (41.4925, -99.9018),
        "Nevada": (38.8026, -116.4194),
        "New Hampshire": (43.1939, -71.5724),
        "New Jersey": (40.0583, -74.4057),
        "New Mexico": (34.5199, -105.8701),
        "New York": (40.7128, -74.006),
        "North Carolina": (35.7596, -79.0193),
        "North Dakota": (47.5515, -101.002),
        "Ohio": (40.4173, -82.9071),
        "Oklahoma": (35.4676, -97.5164),
        "Oregon": (43.8041, -120.5542),
        "Pennsylvania": (41.2033, -77.1945),
        "Rhode Island": (41.5801, -71.4774),
        "South Carolina": (33.8361, -81.1637),
        "South Dakota": (43.9695, -99.9018),
        "Tennessee": (35.5175, -86.5804),
        "Texas": (31.9686, -99.9018),
        "Utah": (39.32, -111.0937),
        "Vermont": (44.5588, -72.5778),
        "Virginia": (37.4316, -78.6569),
        "Washington": (47.7511, -120.7401),
        "West Virginia": (38.5976, -80.4549),
        "Wisconsin": (43.7844, -88.7879),
        "Wyoming": (43.0759, -107.2903),
    },
    "United Kingdom": {
        "England": (52.3555, -1.1743),
        "Scotland": (56.4907, -4.2026),
        "Wales": (52.6302, -3.958),
        "NorthernIreland": (54.7877, -6.4923),
    },
    "Vietnam": {
        "Hanoi": (21.0285, 105.8542),
        "Hà Nội": (21.0285, 105.8542),
        "HoChiMinh": (10.7769, 106.7009),
        "Ho Chi Minh City": (10.7769, 106.7009),
        "DaNang": (16.0544, 108.2022),
        "Đà Nẵng": (16.0544, 108.2022),
        "Hue": (16.4637, 107.5909),
        "Haiphong": (20.8449, 106.6881),
        "CanTho": (10.0452, 105.7469),
        "Bà Rịa - Vũng Tàu": (10.583, 107.25),
    },
}

# Country -> state -> city -> (lat, lng).
CITY_CENTERS: dict[str, dict[str, dict[str, tuple[float, float]]]] = {
    "United Kingdom": {
        "England": {"London": (51.5074, -0.1278)},
    },
    "France": {
        "Île-de-France": {"Paris": (48.8566, 2.3522)},
    },
    "Japan": {
        "Tokyo": {
            "Shinjuku": (35.6938, 139.7036),
            "Shibuya": (35.6581, 139.7017),
            "Chiyoda": (35.6938, 139.7536),
        },
        "Osaka": {
            "Kita": (34.7054, 135.4981),
            "Namba": (34.6688, 135.5015),
        },
        "Kyoto": {"Gion": (35.0039, 135.7771)},
    },
    "United States": {
        "California": {
            "LosAngeles": (34.0522, -118.2437),
            "SanFrancisco": (37.7749, -122.4194),
        },
        "New York": {
            "Manhattan": (40.7831, -73.9712),
            "Brooklyn": (40.6782, -73.9442),
        },
    },
}
