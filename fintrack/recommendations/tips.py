"""
General Financial Tips

The static tip pool appended after personalized advice. Order is part of
the contract: the UI shows tips in this sequence.
"""

from fintrack.models.metrics import (
    Recommendation,
    RecommendationIcon,
    RecommendationType,
)


GENERAL_TIPS = (
    Recommendation(
        id="budget-rule",
        title="50/30/20 Kuralını Deneyin",
        description=(
            "Gelirinizin %50'sini ihtiyaçlara, %30'unu isteklere ve %20'sini "
            "birikime ayırarak dengeli bir bütçe oluşturabilirsiniz."
        ),
        type=RecommendationType.INFO,
        icon=RecommendationIcon.BOOK_OPEN,
    ),
    Recommendation(
        id="compound-interest",
        title="Erken Başlamanın Gücü",
        description=(
            "Küçük miktarlarda bile olsa düzenli yatırım yapmak, bileşik getiri "
            "sayesinde uzun vadede büyük servetler oluşturur."
        ),
        type=RecommendationType.SUCCESS,
        icon=RecommendationIcon.PIGGY_BANK,
    ),
    Recommendation(
        id="track-habit",
        title="Harcamalarınızı Takip Edin",
        description=(
            "Küçük harcamalar (kahve, abonelikler) ay sonunda büyük yekün "
            "tutabilir. Giderlerinizi düzenli olarak gözden geçirin."
        ),
        type=RecommendationType.INFO,
        icon=RecommendationIcon.ZAP,
    ),
    Recommendation(
        id="credit-score",
        title="Kredi Notunuzu Koruyun",
        description=(
            "Faturalarınızı ve kredi kartı borçlarınızı zamanında ödemek, kredi "
            "notunuzu yükseltmenin en kolay yoludur."
        ),
        type=RecommendationType.ACTION,
        icon=RecommendationIcon.CREDIT_CARD,
    ),
    Recommendation(
        id="impulse-buying",
        title="Dürtüsel Alışverişten Kaçının",
        description=(
            "Büyük bir şey almadan önce 24 saat bekleyin. Hala istiyorsanız ve "
            "bütçeniz uygunsa alın."
        ),
        type=RecommendationType.WARNING,
        icon=RecommendationIcon.ALERT_TRIANGLE,
    ),
    Recommendation(
        id="diversification",
        title="Yatırımlarınızı Çeşitlendirin",
        description=(
            "Tüm yumurtaları aynı sepete koymayın. Farklı yatırım araçları "
            "(altın, döviz, borsa) riskinizi azaltır."
        ),
        type=RecommendationType.INFO,
        icon=RecommendationIcon.TRENDING_UP,
    ),
    Recommendation(
        id="subscription-audit",
        title="Aboneliklerinizi Kontrol Edin",
        description=(
            "Kullanmadığınız dijital abonelikleriniz var mı? İptal ederek her ay "
            "tasarruf edebilirsiniz."
        ),
        type=RecommendationType.ACTION,
        icon=RecommendationIcon.ZAP,
    ),
    Recommendation(
        id="financial-goals",
        title="Finansal Hedef Belirleyin",
        description=(
            "Tatil, araba veya ev... Hedef koymak birikim yapma motivasyonunuzu "
            "artırır."
        ),
        type=RecommendationType.SUCCESS,
        icon=RecommendationIcon.TARGET,
    ),
    Recommendation(
        id="inflation-protection",
        title="Enflasyona Karşı Korunun",
        description=(
            "Paranızı nakitte tutmak yerine, değerini koruyacak araçlarda "
            "değerlendirin."
        ),
        type=RecommendationType.WARNING,
        icon=RecommendationIcon.SHIELD,
    ),
    Recommendation(
        id="mental-health",
        title="Para ve Huzur",
        description=(
            "Finansal planlama sadece cüzdanınız için değil, zihinsel huzurunuz "
            "için de önemlidir."
        ),
        type=RecommendationType.INFO,
        icon=RecommendationIcon.SMILE,
    ),
    Recommendation(
        id="side-hustle",
        title="Ek Gelir Kaynakları Yaratın",
        description=(
            "Yeteneklerinizi gelire dönüştürün. Freelance işler veya pasif gelir "
            "kaynakları bütçenizi rahatlatabilir."
        ),
        type=RecommendationType.ACTION,
        icon=RecommendationIcon.BRIEFCASE,
    ),
    Recommendation(
        id="cooking",
        title="Evde Yemek Pişirin",
        description=(
            "Dışarıda yemek yerine evde pişirmek hem sağlığınız hem de cüzdanınız "
            "için daha iyidir. Aylık tasarrufu şaşırtıcı olabilir."
        ),
        type=RecommendationType.INFO,
        icon=RecommendationIcon.COFFEE,
    ),
    Recommendation(
        id="insurance",
        title="Riskleri Sigortalayın",
        description=(
            "Sağlık, ev veya araç sigortası, beklenmedik büyük masraflara karşı "
            "en ucuz korumadır."
        ),
        type=RecommendationType.WARNING,
        icon=RecommendationIcon.SHIELD,
    ),
    Recommendation(
        id="negotiate",
        title="Pazarlık Yapmaktan Çekinmeyin",
        description=(
            "Büyük alımlarda veya hizmet sözleşmelerinde pazarlık yapmak, "
            "sandığınızdan daha fazla tasarruf sağlayabilir."
        ),
        type=RecommendationType.ACTION,
        icon=RecommendationIcon.ZAP,
    ),
    Recommendation(
        id="home-equity",
        title="Eviniz Bir Yatırımdır",
        description=(
            "Ev sahibiyseniz, konut değer artışı uzun vadeli servetinizin önemli "
            "bir parçasıdır. Bakımını ihmal etmeyin."
        ),
        type=RecommendationType.SUCCESS,
        icon=RecommendationIcon.HOME,
    ),
)
